"""Creates sessions on join and tears them down when playback runs dry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from music_session_pipeline.domain.music.entities import GuildQueue
from music_session_pipeline.domain.music.state_machine import QueueStateMachine
from music_session_pipeline.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...domain.music.entities import MediaItem
    from ...domain.music.repository import SessionRegistry
    from ..interfaces.voice_adapter import VoiceAdapter

logger = logging.getLogger(__name__)


class SessionLifecycleService:
    def __init__(
        self,
        *,
        session_registry: SessionRegistry,
        voice_adapter: VoiceAdapter,
    ) -> None:
        self._registry = session_registry
        self._voice_adapter = voice_adapter

    async def open_session(self, guild_id: int, channel_id: int) -> GuildQueue:
        """Return the live queue for a guild, registering a new one if needed.

        A deleted queue left behind by a teardown is replaced.
        """
        queue = await self._registry.get(guild_id)
        if queue is not None and not queue.deleted:
            return queue

        queue = GuildQueue(guild_id=guild_id, channel_id=channel_id)
        await self._registry.put(guild_id, queue)
        logger.info(LogTemplates.SESSION_CREATED, guild_id, channel_id)
        return queue

    async def enqueue(self, guild_id: int, channel_id: int, item: MediaItem) -> int:
        """Add an item to the guild's queue, opening a session first if needed.

        Returns:
            Zero-based position of the item in the queue.
        """
        queue = await self.open_session(guild_id, channel_id)
        position = queue.enqueue(item)
        logger.info(
            LogTemplates.SESSION_ITEM_QUEUED,
            item.title,
            item.duration_formatted,
            guild_id,
            position,
        )
        return position

    async def handle_track_end(self, guild_id: int) -> MediaItem | None:
        """Advance the queue after a track finished on its own.

        When nothing is left to play and the repeat mode does not keep the
        session alive, the session is closed.
        """
        queue = await self._registry.get(guild_id)
        if queue is None or queue.deleted:
            logger.debug(LogTemplates.SESSION_NOT_FOUND, guild_id)
            return None

        next_item = queue.advance()
        if next_item is not None:
            logger.debug(
                LogTemplates.SESSION_TRACK_ADVANCED,
                next_item.title,
                guild_id,
                queue.repeat_mode.display_name,
            )
            return next_item

        if queue.repeat_mode.keeps_session_alive:
            return None

        logger.info(LogTemplates.SESSION_PLAYBACK_EXHAUSTED, guild_id)
        await self.close_session(guild_id)
        return None

    async def close_session(self, guild_id: int) -> bool:
        """Delete a guild's queue and leave voice. Returns False if no queue is registered."""
        queue = await self._registry.get(guild_id)
        if queue is None:
            return False

        QueueStateMachine(queue).delete()
        if self._voice_adapter.is_connected(guild_id):
            await self._voice_adapter.disconnect(guild_id)
        return True

    async def forget_session(self, guild_id: int) -> bool:
        """Close and unregister a guild's session, e.g. after the bot left the guild."""
        closed = await self.close_session(guild_id)
        if closed:
            await self._registry.remove(guild_id)
        return closed
