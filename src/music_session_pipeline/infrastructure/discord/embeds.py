"""Render structured responses as Discord embeds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import discord

if TYPE_CHECKING:
    from ...application.response import Response


def render_embed(response: Response) -> discord.Embed:
    embed = discord.Embed(description=response.description, color=response.color)

    if response.author_name:
        embed.set_author(name=response.author_name, icon_url=response.author_icon_url)

    if response.footer:
        embed.set_footer(text=response.footer)

    return embed
