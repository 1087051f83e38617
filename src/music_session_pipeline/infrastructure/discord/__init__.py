"""Discord transport: bot, cogs, adapters and embed rendering."""
