"""Handler for tearing down a guild's queue and leaving voice."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from music_session_pipeline.application.commands.base import CommandHandler
from music_session_pipeline.application.outcome import Outcome
from music_session_pipeline.domain.music.state_machine import QueueStateMachine
from music_session_pipeline.domain.shared.messages import CommandMessages, LogTemplates

if TYPE_CHECKING:
    from ..context import CorrelationContext
    from ..interfaces.voice_adapter import VoiceAdapter

logger = logging.getLogger(__name__)


class LeaveHandler(CommandHandler):
    """Deletes the queue and disconnects.

    The deleted queue stays registered until the next join replaces it, so a
    repeated ``/leave`` succeeds again and any other command sees a dead session.
    """

    name = "leave"

    def __init__(self, *, voice_adapter: VoiceAdapter) -> None:
        self._voice_adapter = voice_adapter

    async def handle(self, context: CorrelationContext) -> Outcome:
        queue = context.queue
        assert queue is not None

        logger.debug(LogTemplates.LEAVE_DELETING_QUEUE, context.correlation_id, queue.guild_id)
        QueueStateMachine(queue, correlation_id=context.correlation_id).delete()

        if self._voice_adapter.is_connected(queue.guild_id):
            await self._voice_adapter.disconnect(queue.guild_id)

        return Outcome.success(CommandMessages.LEAVE_TITLE, CommandMessages.LEAVE_BODY)
