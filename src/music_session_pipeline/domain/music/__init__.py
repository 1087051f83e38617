"""
Music Bounded Context

Queue state, repeat modes and the transitions allowed between them.
"""

from music_session_pipeline.domain.music.entities import GuildQueue, MediaItem
from music_session_pipeline.domain.music.repository import SessionRegistry
from music_session_pipeline.domain.music.state_machine import (
    QueueStateMachine,
    TransitionResult,
    TransitionStatus,
)
from music_session_pipeline.domain.music.value_objects import RepeatMode

__all__ = [
    # Entities
    "GuildQueue",
    "MediaItem",
    # Value Objects
    "RepeatMode",
    # Repository
    "SessionRegistry",
    # State machine
    "QueueStateMachine",
    "TransitionResult",
    "TransitionStatus",
]
