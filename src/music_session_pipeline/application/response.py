"""Channel-agnostic structured responses and the emitter that builds them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from music_session_pipeline.application.outcome import Outcome, OutcomeKind
from music_session_pipeline.domain.shared.messages import (
    CommandMessages,
    DiscordUIMessages,
    LogTemplates,
)
from music_session_pipeline.domain.shared.types import HexColorInt

if TYPE_CHECKING:
    from ..config.settings import EmbedSettings
    from .context import CorrelationContext

logger = logging.getLogger(__name__)

FALLBACK_COLOR = 0xF23F43
FALLBACK_ICON = "❌"


class Response(BaseModel):
    """What the caller sees; rendering to a concrete channel happens elsewhere."""

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    title: str
    body: str
    color: HexColorInt
    icon: str = ""
    footer: str | None = None
    author_name: str | None = None
    author_icon_url: str | None = None
    correlation_id: str

    @property
    def description(self) -> str:
        heading = f"{self.icon} {self.title}".strip()
        return f"**{heading}**\n{self.body}"


class ResponseEmitter:
    """Turns an :class:`Outcome` into a :class:`Response` tagged with the correlation id."""

    def __init__(self, embed_settings: EmbedSettings) -> None:
        self._embeds = embed_settings

    def emit(self, outcome: Outcome, context: CorrelationContext) -> Response:
        try:
            return self._build(outcome, context)
        except Exception:
            logger.exception(LogTemplates.EMITTER_FAILED, context.correlation_id, outcome.kind)
            return fallback_response(context.correlation_id)

    def _build(self, outcome: Outcome, context: CorrelationContext) -> Response:
        colors = self._embeds.colors
        icons = self._embeds.icons

        icon_key = outcome.icon or outcome.kind.value
        footer = None
        if outcome.kind == OutcomeKind.ERROR:
            footer = DiscordUIMessages.EXECUTION_ID_FOOTER.format(
                correlation_id=context.correlation_id
            )

        author_name = None
        author_icon_url = None
        if outcome.show_author:
            author_name = context.caller.display_name
            author_icon_url = context.caller.avatar_url

        return Response(
            kind=outcome.kind,
            title=outcome.title,
            body=outcome.message,
            color=getattr(colors, outcome.kind.value),
            icon=getattr(icons, icon_key),
            footer=footer,
            author_name=author_name,
            author_icon_url=author_icon_url,
            correlation_id=context.correlation_id,
        )


def fallback_response(correlation_id: str) -> Response:
    """Minimal error response that depends on nothing but constants."""
    return Response(
        kind=OutcomeKind.ERROR,
        title=CommandMessages.FALLBACK_TITLE,
        body=CommandMessages.FALLBACK_BODY,
        color=FALLBACK_COLOR,
        icon=FALLBACK_ICON,
        footer=DiscordUIMessages.EXECUTION_ID_FOOTER.format(correlation_id=correlation_id),
        correlation_id=correlation_id,
    )
