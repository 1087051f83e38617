"""Repeat-mode and deletion transitions for a guild queue.

The queue may be backed by an external playback engine whose setters give no
guarantee of success, so every repeat-mode change is verified by reading the
mode back after it has been applied.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from music_session_pipeline.domain.music.entities import GuildQueue
from music_session_pipeline.domain.music.value_objects import RepeatMode
from music_session_pipeline.domain.shared.exceptions import SessionNotFoundError
from music_session_pipeline.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)


class TransitionStatus(Enum):
    """Result codes for a repeat-mode transition."""

    APPLIED = "applied"
    CONFLICT = "conflict"
    MISMATCH = "mismatch"
    SESSION_GONE = "session_gone"


@dataclass(frozen=True)
class TransitionResult:
    status: TransitionStatus
    previous: RepeatMode
    requested: RepeatMode
    actual: RepeatMode

    @property
    def is_applied(self) -> bool:
        return self.status == TransitionStatus.APPLIED


class QueueStateMachine:
    """Mutation surface for a single :class:`GuildQueue`."""

    def __init__(self, queue: GuildQueue, *, correlation_id: str = "-") -> None:
        self._queue = queue
        self._correlation_id = correlation_id

    @property
    def queue(self) -> GuildQueue:
        return self._queue

    @property
    def current_mode(self) -> RepeatMode:
        return self._queue.repeat_mode

    def set_repeat_mode(self, target: RepeatMode) -> TransitionResult:
        """Apply ``target`` and verify it by re-reading the queue's mode."""
        queue = self._queue
        previous = queue.repeat_mode

        if queue.deleted:
            logger.debug(
                LogTemplates.REPEAT_MODE_SESSION_GONE, self._correlation_id, queue.guild_id
            )
            return TransitionResult(TransitionStatus.SESSION_GONE, previous, target, previous)

        if target == previous:
            logger.debug(
                LogTemplates.REPEAT_MODE_CONFLICT,
                self._correlation_id,
                target.display_name,
                queue.guild_id,
            )
            return TransitionResult(TransitionStatus.CONFLICT, previous, target, previous)

        try:
            queue.set_repeat_mode(target)
        except SessionNotFoundError:
            logger.debug(
                LogTemplates.REPEAT_MODE_SESSION_GONE, self._correlation_id, queue.guild_id
            )
            return TransitionResult(TransitionStatus.SESSION_GONE, previous, target, previous)

        actual = queue.repeat_mode
        if actual != target:
            logger.warning(
                LogTemplates.REPEAT_MODE_MISMATCH,
                self._correlation_id,
                queue.guild_id,
                target.display_name,
                _describe(actual),
            )
            return TransitionResult(TransitionStatus.MISMATCH, previous, target, actual)

        logger.info(
            LogTemplates.REPEAT_MODE_CHANGED,
            self._correlation_id,
            previous.display_name,
            target.display_name,
            queue.guild_id,
        )
        return TransitionResult(TransitionStatus.APPLIED, previous, target, actual)

    def delete(self) -> bool:
        """Delete the queue unless it already is. Returns True if this call deleted it."""
        queue = self._queue
        if queue.deleted:
            logger.debug(LogTemplates.QUEUE_ALREADY_DELETED, queue.guild_id)
            return False

        queue.delete()
        logger.info(LogTemplates.QUEUE_DELETED, queue.guild_id)
        return True


def _describe(mode: object) -> str:
    if isinstance(mode, RepeatMode):
        return mode.display_name
    return repr(mode)
