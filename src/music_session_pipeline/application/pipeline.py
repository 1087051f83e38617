"""Command pipeline: resolve session, validate, handle, respond.

Every inbound command gets a fresh correlation id which is attached to all
log lines and to error responses.
"""

from __future__ import annotations

import asyncio
import contextlib
import dataclasses
import logging
import weakref
from collections.abc import AsyncIterator, Iterable
from typing import TYPE_CHECKING

from music_session_pipeline.application.context import (
    CorrelationContext,
    InboundCommand,
    new_correlation_id,
)
from music_session_pipeline.application.outcome import Outcome
from music_session_pipeline.application.validation.chain import ValidatorChain
from music_session_pipeline.domain.shared.messages import CommandMessages, LogTemplates

if TYPE_CHECKING:
    from ..domain.music.repository import SessionRegistry
    from .commands.base import CommandHandler
    from .interfaces.voice_adapter import VoiceAdapter
    from .response import Response, ResponseEmitter

logger = logging.getLogger(__name__)


class SessionLocks:
    """One asyncio lock per guild, created on first use.

    Entries are weak: a lock nobody holds or waits on is dropped.
    """

    def __init__(self) -> None:
        self._locks: weakref.WeakValueDictionary[int, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def get(self, guild_id: int) -> asyncio.Lock:
        lock = self._locks.get(guild_id)
        if lock is None:
            lock = self._locks[guild_id] = asyncio.Lock()
        return lock

    def __len__(self) -> int:
        return len(self._locks)


class CommandPipeline:
    def __init__(
        self,
        *,
        session_registry: SessionRegistry,
        voice_adapter: VoiceAdapter,
        emitter: ResponseEmitter,
        handlers: Iterable[CommandHandler],
        support_url: str,
        serialize_sessions: bool = True,
    ) -> None:
        self._registry = session_registry
        self._voice_adapter = voice_adapter
        self._emitter = emitter
        self._handlers = {handler.name: handler for handler in handlers}
        self._chains = {
            name: ValidatorChain(handler.validators) for name, handler in self._handlers.items()
        }
        self._support_url = support_url
        self._locks = SessionLocks() if serialize_sessions else None

    @property
    def command_names(self) -> list[str]:
        return sorted(self._handlers)

    async def execute(
        self, command: InboundCommand, *, correlation_id: str | None = None
    ) -> Response:
        """Run one command to completion and return exactly one response."""
        context = CorrelationContext(
            correlation_id=correlation_id or new_correlation_id(), command=command
        )
        logger.info(
            LogTemplates.PIPELINE_RECEIVED,
            context.correlation_id,
            command.name,
            command.session_key,
            command.caller.user_id,
        )

        try:
            outcome = await self._dispatch(context)
        except Exception:
            logger.exception(
                LogTemplates.PIPELINE_UNHANDLED_ERROR, context.correlation_id, command.name
            )
            outcome = Outcome.error(
                CommandMessages.UNEXPECTED_ERROR_TITLE,
                CommandMessages.UNEXPECTED_ERROR_BODY.format(support_url=self._support_url),
                reason="unhandled_exception",
            )

        logger.info(
            LogTemplates.PIPELINE_OUTCOME, context.correlation_id, command.name, outcome.kind
        )
        return self._emitter.emit(outcome, context)

    async def _resolve(self, context: CorrelationContext) -> CorrelationContext:
        guild_id = context.session_key
        queue = await self._registry.lookup(guild_id)
        if queue is None:
            logger.debug(LogTemplates.SESSION_NOT_FOUND, guild_id)
        return dataclasses.replace(
            context,
            queue=queue,
            bot_channel_id=self._voice_adapter.get_current_channel_id(guild_id),
        )

    async def _dispatch(self, context: CorrelationContext) -> Outcome:
        handler = self._handlers.get(context.command_name)
        if handler is None:
            logger.warning(
                LogTemplates.PIPELINE_UNKNOWN_COMMAND, context.correlation_id, context.command_name
            )
            return Outcome.warning(
                CommandMessages.UNKNOWN_COMMAND_TITLE,
                CommandMessages.UNKNOWN_COMMAND_BODY.format(name=context.command_name),
                reason="unknown_command",
            )

        async with self._session_guard(context.session_key):
            context = await self._resolve(context)
            result = await self._chains[handler.name].run(context)
            if not result.passed:
                return Outcome.warning(
                    result.title,
                    result.message,
                    reason=result.reason.value if result.reason else None,
                )

            logger.debug(
                LogTemplates.PIPELINE_VALIDATORS_PASSED, context.correlation_id, handler.name
            )
            return await handler.handle(context)

    @contextlib.asynccontextmanager
    async def _session_guard(self, guild_id: int) -> AsyncIterator[None]:
        if self._locks is None:
            yield
            return

        async with self._locks.get(guild_id):
            yield
