"""
Music Domain Repository Interfaces

Abstract base classes defining the contracts for session storage.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod

from music_session_pipeline.domain.music.entities import GuildQueue


class SessionRegistry(ABC):
    """Abstract registry mapping a guild ID to its single live queue.

    The playback engine owns the queues; the command pipeline only depends on
    this lookup contract, so tests can inject a fake registry.
    """

    @abstractmethod
    async def get(self, guild_id: int) -> GuildQueue | None:
        """Retrieve the queue for a guild.

        Args:
            guild_id: The Discord guild ID.

        Returns:
            The queue if one is registered, None otherwise.
        """
        ...

    @abstractmethod
    async def put(self, guild_id: int, queue: GuildQueue) -> None:
        """Register a queue for a guild, replacing any previous entry.

        Args:
            guild_id: The Discord guild ID.
            queue: The queue to register.
        """
        ...

    @abstractmethod
    async def remove(self, guild_id: int) -> bool:
        """Forget the queue for a guild.

        Args:
            guild_id: The Discord guild ID.

        Returns:
            True if an entry was removed, False if none existed.
        """
        ...

    async def lookup(self, guild_id: int) -> GuildQueue | None:
        """Side-effect-free lookup used by the command pipeline."""
        return await self.get(guild_id)
