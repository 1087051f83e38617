"""Port interface for Discord voice presence."""

from __future__ import annotations

from abc import ABC, abstractmethod

from music_session_pipeline.domain.shared.types import ChannelIdField, DiscordSnowflake


class VoiceAdapter(ABC):
    """Interface for the bot's own voice connection in a guild."""

    @abstractmethod
    def is_connected(self, guild_id: DiscordSnowflake) -> bool:
        ...

    @abstractmethod
    def get_current_channel_id(self, guild_id: DiscordSnowflake) -> ChannelIdField | None:
        """Get the bot's current voice channel ID, or None if not connected."""
        ...

    @abstractmethod
    async def disconnect(self, guild_id: DiscordSnowflake) -> bool:
        """Disconnect from voice in a guild."""
        ...
