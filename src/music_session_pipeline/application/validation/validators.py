"""Read-only precondition checks shared by the queue commands.

Each validator takes a :class:`CorrelationContext`, never mutates state, copes
with a missing queue, and returns a :class:`ValidationResult`.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from music_session_pipeline.application.context import CorrelationContext
from music_session_pipeline.domain.shared.messages import LogTemplates, ValidationMessages

logger = logging.getLogger(__name__)


class FailureReason(Enum):
    """Internal reason codes for rejected commands."""

    NOT_IN_VOICE = "not_in_voice"
    NOT_SAME_CHANNEL = "not_same_channel"
    NO_QUEUE = "no_queue"


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: FailureReason | None = None
    title: str = ""
    message: str = ""

    @property
    def passed(self) -> bool:
        return self.reason is None

    @classmethod
    def ok(cls) -> ValidationResult:
        return _PASS

    @classmethod
    def fail(cls, reason: FailureReason, title: str, message: str) -> ValidationResult:
        return cls(reason=reason, title=title, message=message)


_PASS = ValidationResult()

Validator = Callable[[CorrelationContext], Awaitable[ValidationResult]]


def _reject(
    context: CorrelationContext, reason: FailureReason, title: str, message: str
) -> ValidationResult:
    logger.debug(LogTemplates.VALIDATOR_FAILED, context.correlation_id, reason.value, title)
    return ValidationResult.fail(reason, title, message)


async def check_in_voice_channel(context: CorrelationContext) -> ValidationResult:
    """The caller must be connected to a voice channel."""
    if not context.caller.in_voice:
        return _reject(
            context,
            FailureReason.NOT_IN_VOICE,
            ValidationMessages.NOT_IN_VOICE_TITLE,
            ValidationMessages.NOT_IN_VOICE_BODY,
        )
    return ValidationResult.ok()


async def check_same_voice_channel(context: CorrelationContext) -> ValidationResult:
    """The caller must share the bot's voice channel, when the bot is in one."""
    bot_channel_id = context.bot_channel_id
    if bot_channel_id is None and context.queue is not None and not context.queue.deleted:
        bot_channel_id = context.queue.channel_id

    if bot_channel_id is not None and context.caller.voice_channel_id != bot_channel_id:
        return _reject(
            context,
            FailureReason.NOT_SAME_CHANNEL,
            ValidationMessages.NOT_SAME_CHANNEL_TITLE,
            ValidationMessages.NOT_SAME_CHANNEL_BODY.format(channel_id=bot_channel_id),
        )
    return ValidationResult.ok()


async def check_queue_exists(context: CorrelationContext) -> ValidationResult:
    """A queue must have been registered for the guild when the command arrived.

    A deleted queue still counts; mutating it is rejected by the state machine.
    """
    if context.queue is None:
        return _reject(
            context,
            FailureReason.NO_QUEUE,
            ValidationMessages.NO_QUEUE_TITLE,
            ValidationMessages.NO_QUEUE_BODY,
        )
    return ValidationResult.ok()


QUEUE_COMMAND_VALIDATORS: tuple[Validator, ...] = (
    check_in_voice_channel,
    check_same_voice_channel,
    check_queue_exists,
)
"""Fixed order: channel membership first, queue existence last."""
