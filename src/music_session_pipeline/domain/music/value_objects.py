"""Immutable value objects for the music bounded context."""

from __future__ import annotations

from enum import IntEnum
from typing import assert_never

from music_session_pipeline.domain.shared.messages import ErrorMessages


class RepeatMode(IntEnum):
    """What happens when the current track finishes.

    Values match the slash-command option choices (``"0"`` … ``"3"``) and the
    playback engine's own numbering, so raw selectors convert with ``RepeatMode(n)``.
    """

    DISABLED = 0
    TRACK = 1  # Replay current track
    QUEUE = 2  # Re-append finished tracks to the end
    AUTOPLAY = 3  # Engine keeps playing similar tracks once the queue runs dry

    @property
    def display_name(self) -> str:
        """Lower-case label shown to users."""
        match self:
            case RepeatMode.DISABLED:
                return "disabled"
            case RepeatMode.TRACK:
                return "track"
            case RepeatMode.QUEUE:
                return "queue"
            case RepeatMode.AUTOPLAY:
                return "autoplay"
            case _:
                assert_never(self)

    @property
    def keeps_session_alive(self) -> bool:
        """Whether an exhausted queue should keep the session open."""
        return self is not RepeatMode.DISABLED

    @classmethod
    def from_option(cls, value: int | None) -> RepeatMode | None:
        """Convert a pre-parsed command option into a mode, ``None`` when absent."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            raise ValueError(ErrorMessages.UNKNOWN_REPEAT_MODE.format(value=value)) from None
