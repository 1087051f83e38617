"""Discord client that owns the container and loads the player cog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from music_session_pipeline.domain.shared.messages import DiscordUIMessages, LogTemplates

if TYPE_CHECKING:
    from discord import app_commands

    from ...config.container import Container
    from ...config.settings import Settings
    from ...domain.music.entities import MediaItem

logger = logging.getLogger(__name__)

COG_EXTENSIONS = ("music_session_pipeline.infrastructure.discord.cogs.player_cog",)


def _intents() -> discord.Intents:
    # Member voice state is needed to resolve the caller's channel
    intents = discord.Intents.default()
    intents.guilds = True
    intents.voice_states = True
    return intents


class MusicBot(commands.Bot):
    def __init__(self, container: Container, settings: Settings, **kwargs) -> None:
        super().__init__(
            command_prefix=settings.discord.command_prefix,
            intents=_intents(),
            help_command=None,
            **kwargs,
        )
        self.container = container
        self.settings = settings
        container.set_bot(self)

    async def setup_hook(self) -> None:
        logger.info(LogTemplates.BOT_SETUP)

        for extension in COG_EXTENSIONS:
            try:
                await self.load_extension(extension)
            except Exception as e:
                logger.exception(LogTemplates.BOT_COG_LOAD_FAILED, extension, e)
                raise
            logger.info(LogTemplates.BOT_COG_LOADED, extension)

        self.tree.on_error = self._on_app_command_error

        if self.settings.discord.sync_on_startup:
            try:
                await self._sync_commands()
            except discord.DiscordException as e:
                logger.warning(LogTemplates.BOT_SYNC_ON_STARTUP_FAILED, e)

        logger.info(LogTemplates.BOT_SETUP_COMPLETE)

    async def _sync_commands(self) -> None:
        """Sync to the configured guilds, or globally when none are configured."""
        guild_ids = self.settings.discord.guild_ids
        if not guild_ids:
            synced = await self.tree.sync()
            logger.info(LogTemplates.BOT_SYNCED_GLOBAL, len(synced))
            return

        for guild_id in guild_ids:
            synced = await self.tree.sync(guild=discord.Object(id=guild_id))
            logger.info(LogTemplates.BOT_SYNCED_GUILD, len(synced), guild_id)

    async def _on_app_command_error(
        self, interaction: discord.Interaction, error: app_commands.AppCommandError
    ) -> None:
        """Errors that escaped the command pipeline, e.g. a failed defer."""
        command_name = interaction.command.name if interaction.command else "<unknown>"
        logger.error(
            LogTemplates.BOT_SLASH_COMMAND_ERROR, command_name, getattr(error, "original", error)
        )

        send = (
            interaction.followup.send
            if interaction.response.is_done()
            else interaction.response.send_message
        )
        try:
            await send(DiscordUIMessages.ERROR_COMMAND_FAILED_SEE_LOGS, ephemeral=True)
        except discord.HTTPException as e:
            logger.warning(LogTemplates.BOT_ERROR_REPLY_FAILED, command_name, e)

    async def on_guild_remove(self, guild: discord.Guild) -> None:
        await self.container.session_lifecycle.forget_session(guild.id)

    async def on_voice_state_update(
        self, member: discord.Member, before: discord.VoiceState, after: discord.VoiceState
    ) -> None:
        # Only the bot's own voice state drives the session
        if self.user is None or member.id != self.user.id:
            return

        lifecycle = self.container.session_lifecycle
        if after.channel is not None:
            await lifecycle.open_session(member.guild.id, after.channel.id)
        elif before.channel is not None:
            await lifecycle.close_session(member.guild.id)

    async def on_track_queued(self, guild_id: int, channel_id: int, item: MediaItem) -> None:
        """Raised by the playback engine via ``bot.dispatch("track_queued", ...)``."""
        await self.container.session_lifecycle.enqueue(guild_id, channel_id, item)

    async def on_track_end(self, guild_id: int) -> None:
        """Raised by the playback engine via ``bot.dispatch("track_end", guild_id)``."""
        await self.container.session_lifecycle.handle_track_end(guild_id)

    async def on_ready(self) -> None:
        if self.user is not None:
            logger.info(LogTemplates.BOT_READY, self.user, self.user.id)


def create_bot(container: Container, settings: Settings) -> MusicBot:
    return MusicBot(container=container, settings=settings)
