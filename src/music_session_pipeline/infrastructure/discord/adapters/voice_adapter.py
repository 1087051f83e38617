"""Discord voice adapter implementing VoiceAdapter over the guild's voice client."""

from __future__ import annotations

import logging

import discord

from music_session_pipeline.application.interfaces.voice_adapter import VoiceAdapter
from music_session_pipeline.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)


class DiscordVoiceAdapter(VoiceAdapter):
    def __init__(self, bot: discord.Client) -> None:
        self._bot = bot

    def _get_voice_client(self, guild_id: int) -> discord.VoiceClient | None:
        guild = self._bot.get_guild(guild_id)
        if not guild:
            return None

        vc = guild.voice_client
        return vc if isinstance(vc, discord.VoiceClient) else None

    def is_connected(self, guild_id: int) -> bool:
        vc = self._get_voice_client(guild_id)
        return vc is not None and vc.is_connected()

    def get_current_channel_id(self, guild_id: int) -> int | None:
        vc = self._get_voice_client(guild_id)
        if vc and vc.channel:
            return vc.channel.id
        return None

    async def disconnect(self, guild_id: int) -> bool:
        vc = self._get_voice_client(guild_id)
        if not vc:
            logger.debug(LogTemplates.VOICE_NOT_CONNECTED, guild_id)
            return True

        try:
            await vc.disconnect(force=True)
            logger.info(LogTemplates.VOICE_DISCONNECTED, guild_id)
            return True
        except Exception:
            logger.exception(LogTemplates.VOICE_DISCONNECT_FAILED, guild_id)
            return False
