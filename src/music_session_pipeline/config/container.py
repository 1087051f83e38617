"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
for the session registry, adapters, handlers and the command pipeline.
Components are created on-demand and cached for reuse throughout the application.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import ErrorMessages

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from discord.ext.commands import Bot

    from ..application.commands.leave import LeaveHandler
    from ..application.commands.loop import LoopHandler
    from ..application.interfaces.voice_adapter import VoiceAdapter
    from ..application.pipeline import CommandPipeline
    from ..application.response import ResponseEmitter
    from ..application.services.session_lifecycle import SessionLifecycleService
    from ..domain.music.repository import SessionRegistry
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed. Tests may assign the
    private slots directly to swap in fakes before first access.
    """

    settings: Settings
    _bot: Bot | None = None

    # Storage and adapters
    _session_registry: SessionRegistry | None = None
    _voice_adapter: VoiceAdapter | None = None

    # Application
    _response_emitter: ResponseEmitter | None = None
    _leave_handler: LeaveHandler | None = None
    _loop_handler: LoopHandler | None = None
    _command_pipeline: CommandPipeline | None = None
    _session_lifecycle: SessionLifecycleService | None = None

    def set_bot(self, bot: Bot) -> None:
        """Set the Discord bot instance."""
        self._bot = bot

    @property
    def bot(self) -> Bot:
        """Get the Discord bot instance."""
        if self._bot is None:
            raise RuntimeError(ErrorMessages.BOT_NOT_INITIALIZED)
        return self._bot

    # === Storage ===

    @property
    def session_registry(self) -> SessionRegistry:
        if self._session_registry is None:
            from ..infrastructure.persistence.session_registry import InMemorySessionRegistry

            self._session_registry = InMemorySessionRegistry()
        return self._session_registry

    # === Adapters ===

    @property
    def voice_adapter(self) -> VoiceAdapter:
        if self._voice_adapter is None:
            from ..infrastructure.discord.adapters.voice_adapter import DiscordVoiceAdapter

            self._voice_adapter = DiscordVoiceAdapter(self.bot)
        return self._voice_adapter

    # === Application ===

    @property
    def response_emitter(self) -> ResponseEmitter:
        if self._response_emitter is None:
            from ..application.response import ResponseEmitter

            self._response_emitter = ResponseEmitter(self.settings.embeds)
        return self._response_emitter

    @property
    def leave_handler(self) -> LeaveHandler:
        if self._leave_handler is None:
            from ..application.commands.leave import LeaveHandler

            self._leave_handler = LeaveHandler(voice_adapter=self.voice_adapter)
        return self._leave_handler

    @property
    def loop_handler(self) -> LoopHandler:
        if self._loop_handler is None:
            from ..application.commands.loop import LoopHandler

            self._loop_handler = LoopHandler(support_url=self.settings.bot.server_invite_url)
        return self._loop_handler

    @property
    def command_pipeline(self) -> CommandPipeline:
        if self._command_pipeline is None:
            from ..application.pipeline import CommandPipeline

            self._command_pipeline = CommandPipeline(
                session_registry=self.session_registry,
                voice_adapter=self.voice_adapter,
                emitter=self.response_emitter,
                handlers=[self.leave_handler, self.loop_handler],
                support_url=self.settings.bot.server_invite_url,
                serialize_sessions=self.settings.pipeline.serialize_sessions,
            )
        return self._command_pipeline

    @property
    def session_lifecycle(self) -> SessionLifecycleService:
        if self._session_lifecycle is None:
            from ..application.services.session_lifecycle import SessionLifecycleService

            self._session_lifecycle = SessionLifecycleService(
                session_registry=self.session_registry,
                voice_adapter=self.voice_adapter,
            )
        return self._session_lifecycle


def create_container(settings: Settings | None = None) -> Container:
    """Create a new container, loading settings from the environment when omitted."""
    if settings is None:
        from .settings import get_settings

        settings = get_settings()

    return Container(settings=settings)
