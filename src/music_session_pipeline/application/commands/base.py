"""Shared shape of a queue command handler."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar

from music_session_pipeline.application.validation.validators import QUEUE_COMMAND_VALIDATORS

if TYPE_CHECKING:
    from ..context import CorrelationContext
    from ..outcome import Outcome
    from ..validation.validators import Validator


class CommandHandler(ABC):
    """Business logic for one slash command.

    The pipeline runs :attr:`validators` first; :meth:`handle` is only called
    once all of them passed and must return exactly one outcome.
    """

    name: ClassVar[str]
    validators: ClassVar[Sequence[Validator]] = QUEUE_COMMAND_VALIDATORS

    @abstractmethod
    async def handle(self, context: CorrelationContext) -> Outcome:
        ...
