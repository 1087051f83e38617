"""Slash-command cog for queue teardown and repeat mode: leave, loop."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord import app_commands
from discord.ext import commands

from music_session_pipeline.application.context import Caller, InboundCommand
from music_session_pipeline.domain.shared.messages import DiscordUIMessages, ErrorMessages
from music_session_pipeline.infrastructure.discord.embeds import render_embed

if TYPE_CHECKING:
    from ....config.container import Container

logger = logging.getLogger(__name__)

LOOP_MODE_CHOICES = [
    app_commands.Choice(name="Track", value="1"),
    app_commands.Choice(name="Queue", value="2"),
    app_commands.Choice(name="Autoplay", value="3"),
    app_commands.Choice(name="Disabled", value="0"),
]


def caller_from_interaction(interaction: discord.Interaction) -> Caller:
    user = interaction.user
    voice_channel_id = None
    if isinstance(user, discord.Member) and user.voice and user.voice.channel:
        voice_channel_id = user.voice.channel.id

    return Caller(
        user_id=user.id,
        display_name=getattr(user, "display_name", None) or user.name,
        avatar_url=user.display_avatar.url if user.display_avatar else None,
        voice_channel_id=voice_channel_id,
    )


class PlayerCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container

    @app_commands.command(
        name="leave", description="Clear the queue and remove bot from voice channel."
    )
    async def leave(self, interaction: discord.Interaction) -> None:
        await self._run(interaction, "leave")

    @app_commands.command(
        name="loop", description="Toggle looping a track, the whole queue or autoplay."
    )
    @app_commands.describe(mode="Loop mode: Track, queue, autoplay or disabled.")
    @app_commands.choices(mode=LOOP_MODE_CHOICES)
    async def loop(
        self,
        interaction: discord.Interaction,
        mode: app_commands.Choice[str] | None = None,
    ) -> None:
        options = {"mode": int(mode.value)} if mode is not None else {}
        await self._run(interaction, "loop", options)

    async def _run(
        self,
        interaction: discord.Interaction,
        name: str,
        options: dict[str, int] | None = None,
    ) -> None:
        if not interaction.guild:
            await interaction.response.send_message(
                DiscordUIMessages.STATE_SERVER_ONLY, ephemeral=True
            )
            return

        await interaction.response.defer()

        command = InboundCommand(
            name=name,
            session_key=interaction.guild.id,
            caller=caller_from_interaction(interaction),
            options=options or {},
        )
        response = await self.container.command_pipeline.execute(command)
        await interaction.followup.send(embed=render_embed(response))


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(PlayerCog(bot, container))
