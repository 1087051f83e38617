"""Discord cogs - command handlers."""

from music_session_pipeline.infrastructure.discord.cogs.player_cog import PlayerCog

__all__ = ["PlayerCog"]
