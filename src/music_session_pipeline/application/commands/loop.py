"""Handler for reading or changing a guild's repeat mode."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from music_session_pipeline.application.commands.base import CommandHandler
from music_session_pipeline.application.outcome import Outcome
from music_session_pipeline.application.validation.validators import FailureReason
from music_session_pipeline.domain.music.state_machine import (
    QueueStateMachine,
    TransitionResult,
    TransitionStatus,
)
from music_session_pipeline.domain.music.value_objects import RepeatMode
from music_session_pipeline.domain.shared.messages import (
    CommandMessages,
    LogTemplates,
    ValidationMessages,
)

if TYPE_CHECKING:
    from ..context import CorrelationContext

logger = logging.getLogger(__name__)


class LoopHandler(CommandHandler):
    name = "loop"

    def __init__(self, *, support_url: str) -> None:
        self._support_url = support_url

    async def handle(self, context: CorrelationContext) -> Outcome:
        queue = context.queue
        assert queue is not None

        target = RepeatMode.from_option(context.command.option("mode"))  # type: ignore[arg-type]
        machine = QueueStateMachine(queue, correlation_id=context.correlation_id)

        if target is None:
            if queue.deleted:
                return _no_queue()

            current = machine.current_mode
            logger.debug(
                LogTemplates.LOOP_REPORTING_CURRENT, context.correlation_id, current.display_name
            )
            return Outcome.info(
                CommandMessages.LOOP_CURRENT_TITLE,
                CommandMessages.LOOP_CURRENT_BODY.format(mode=current.display_name),
                icon="autoplay" if current is RepeatMode.AUTOPLAY else "loop",
            )

        return self._outcome_for(machine.set_repeat_mode(target))

    def _outcome_for(self, result: TransitionResult) -> Outcome:
        requested = result.requested.display_name
        previous = result.previous.display_name

        match result.status:
            case TransitionStatus.CONFLICT:
                return Outcome.warning(
                    CommandMessages.LOOP_ALREADY_SET_TITLE,
                    CommandMessages.LOOP_ALREADY_SET_BODY.format(mode=requested),
                    reason=result.status.value,
                )
            case TransitionStatus.SESSION_GONE:
                return _no_queue()
            case TransitionStatus.MISMATCH:
                return Outcome.error(
                    CommandMessages.LOOP_FAILED_TITLE,
                    CommandMessages.LOOP_FAILED_BODY.format(
                        mode=requested, support_url=self._support_url
                    ),
                    reason=result.status.value,
                )
            case TransitionStatus.APPLIED:
                pass

        match result.requested:
            case RepeatMode.DISABLED:
                return Outcome.success(
                    CommandMessages.LOOP_DISABLED_TITLE,
                    CommandMessages.LOOP_DISABLED_BODY.format(previous=previous, mode=requested),
                )
            case RepeatMode.AUTOPLAY:
                return Outcome.success(
                    CommandMessages.LOOP_AUTOPLAY_TITLE,
                    CommandMessages.LOOP_AUTOPLAY_BODY.format(previous=previous, mode=requested),
                    icon="autoplaying",
                )
            case _:
                return Outcome.success(
                    CommandMessages.LOOP_ENABLED_TITLE,
                    CommandMessages.LOOP_ENABLED_BODY.format(previous=previous, mode=requested),
                    icon="looping",
                )


def _no_queue() -> Outcome:
    return Outcome.warning(
        ValidationMessages.NO_QUEUE_TITLE,
        ValidationMessages.NO_QUEUE_BODY,
        reason=FailureReason.NO_QUEUE.value,
    )
