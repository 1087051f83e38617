"""In-memory implementation of the session registry."""

from __future__ import annotations

import logging

from music_session_pipeline.domain.music.entities import GuildQueue
from music_session_pipeline.domain.music.repository import SessionRegistry
from music_session_pipeline.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)


class InMemorySessionRegistry(SessionRegistry):
    """Keeps live queues in a dict for the lifetime of the process."""

    def __init__(self) -> None:
        self._sessions: dict[int, GuildQueue] = {}

    async def get(self, guild_id: int) -> GuildQueue | None:
        return self._sessions.get(guild_id)

    async def put(self, guild_id: int, queue: GuildQueue) -> None:
        self._sessions[guild_id] = queue

    async def remove(self, guild_id: int) -> bool:
        if self._sessions.pop(guild_id, None) is None:
            return False
        logger.debug(LogTemplates.SESSION_REMOVED, guild_id)
        return True
