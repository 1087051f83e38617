"""Core domain entities for the music bounded context."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from music_session_pipeline.domain.music.value_objects import RepeatMode
from music_session_pipeline.domain.shared.datetime_utils import utcnow
from music_session_pipeline.domain.shared.exceptions import (
    BusinessRuleViolationError,
    SessionNotFoundError,
)
from music_session_pipeline.domain.shared.messages import ErrorMessages
from music_session_pipeline.domain.shared.types import (
    ChannelIdField,
    DurationSeconds,
    GuildIdField,
    HttpUrlStr,
    NonEmptyStr,
    TrackTitleStr,
    UserIdField,
    UtcDatetimeField,
)


class MediaItem(BaseModel):
    """Immutable value object representing a playable queue entry."""

    model_config = ConfigDict(frozen=True, strict=True)

    id: NonEmptyStr
    title: TrackTitleStr
    webpage_url: HttpUrlStr
    duration_seconds: DurationSeconds | None = None
    requested_by_id: UserIdField | None = None

    @property
    def duration_formatted(self) -> str:
        """Format duration as MM:SS or HH:MM:SS."""
        if self.duration_seconds is None:
            return "Unknown"

        hours, remainder = divmod(self.duration_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)

        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"


class GuildQueue(BaseModel):
    """Per-guild playback queue owned by a single session.

    Mutations go through the methods below; once :meth:`delete` has run every
    further mutation raises :class:`SessionNotFoundError`.
    """

    model_config = ConfigDict(strict=True)

    MAX_QUEUE_SIZE: ClassVar[int] = 50

    guild_id: GuildIdField
    channel_id: ChannelIdField | None = None
    items: list[MediaItem] = Field(default_factory=list)
    current_item: MediaItem | None = None
    repeat_mode: RepeatMode = RepeatMode.DISABLED
    deleted: bool = False
    created_at: UtcDatetimeField = Field(default_factory=utcnow)
    last_activity: UtcDatetimeField = Field(default_factory=utcnow)

    @property
    def size(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def has_items(self) -> bool:
        return self.current_item is not None or bool(self.items)

    def touch(self) -> None:
        """Update last activity timestamp."""
        self.last_activity = utcnow()

    def _ensure_live(self) -> None:
        if self.deleted:
            raise SessionNotFoundError(
                self.guild_id, ErrorMessages.QUEUE_DELETED.format(guild_id=self.guild_id)
            )

    def enqueue(self, item: MediaItem) -> int:
        """Add an item to the end of the queue and return its zero-based position."""
        self._ensure_live()
        if self.size >= self.MAX_QUEUE_SIZE:
            raise BusinessRuleViolationError(
                rule="MAX_QUEUE_SIZE",
                message=ErrorMessages.QUEUE_FULL.format(max_size=self.MAX_QUEUE_SIZE),
            )

        self.items.append(item)
        self.touch()
        return self.size - 1

    def dequeue(self) -> MediaItem | None:
        """Remove and return the next item from the queue."""
        self._ensure_live()
        if not self.items:
            return None

        item = self.items.pop(0)
        self.touch()
        return item

    def set_repeat_mode(self, mode: RepeatMode) -> None:
        self._ensure_live()
        self.repeat_mode = mode
        self.touch()

    def advance(self) -> MediaItem | None:
        """Move on to the next item according to the repeat mode."""
        self._ensure_live()
        if self.repeat_mode is RepeatMode.TRACK and self.current_item:
            return self.current_item

        if self.repeat_mode is RepeatMode.QUEUE and self.current_item:
            self.items.append(self.current_item)

        self.current_item = self.dequeue()
        self.touch()
        return self.current_item

    def delete(self) -> None:
        """Drop all items and mark the queue deleted. Safe to call repeatedly."""
        if self.deleted:
            return

        self.items.clear()
        self.current_item = None
        self.deleted = True
        self.touch()
