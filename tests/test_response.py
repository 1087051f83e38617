"""
Unit Tests for the Response Emitter

Tests for:
- Color and icon selection per outcome kind
- Execution ID footer on error responses only
- Author fields on success responses
- Fallback response when building fails
"""

import logging
from unittest.mock import MagicMock

import pytest

from music_session_pipeline.application.outcome import Outcome, OutcomeKind
from music_session_pipeline.application.response import (
    FALLBACK_COLOR,
    Response,
    ResponseEmitter,
    fallback_response,
)
from music_session_pipeline.config.settings import (
    EmbedColorSettings,
    EmbedIconSettings,
    EmbedSettings,
)
from support import AVATAR_URL, make_context


class TestResponseEmitter:
    """Tests for ResponseEmitter.emit."""

    def test_success_has_author_and_no_footer(self, emitter):
        response = emitter.emit(Outcome.success("Done", "All good"), make_context())

        assert response.kind is OutcomeKind.SUCCESS
        assert response.color == 0x23A55A
        assert response.icon == "✅"
        assert response.author_name == "TestUser"
        assert response.author_icon_url == AVATAR_URL
        assert response.footer is None

    def test_warning_has_no_author(self, emitter):
        response = emitter.emit(Outcome.warning("Careful", "Hmm"), make_context())

        assert response.color == 0xF0B232
        assert response.author_name is None
        assert response.footer is None

    def test_error_carries_execution_id(self, emitter):
        context = make_context(correlation_id="deadbeef-0001")

        response = emitter.emit(Outcome.error("Broken", "Nope"), context)

        assert response.footer == "Execution ID: deadbeef-0001"
        assert response.correlation_id == "deadbeef-0001"
        assert response.color == 0xF23F43

    def test_custom_icon_key(self, emitter):
        response = emitter.emit(Outcome.success("Loop", "x", icon="looping"), make_context())

        assert response.icon == "🔁"

    def test_configured_colors_and_icons(self):
        settings = EmbedSettings(
            colors=EmbedColorSettings(info=0x123456),
            icons=EmbedIconSettings(info="💡"),
        )

        response = ResponseEmitter(settings).emit(Outcome.info("Hi", "there"), make_context())

        assert response.color == 0x123456
        assert response.description == "**💡 Hi**\nthere"

    def test_unknown_icon_falls_back(self, emitter, caplog):
        outcome = Outcome.success("Done", "x", icon="no-such-icon")

        with caplog.at_level(logging.ERROR):
            response = emitter.emit(outcome, make_context(correlation_id="cid-7"))

        assert response.kind is OutcomeKind.ERROR
        assert response.color == FALLBACK_COLOR
        assert response.footer == "Execution ID: cid-7"
        assert "cid-7" in caplog.text

    def test_emit_never_raises(self):
        broken = MagicMock()
        broken.colors = None

        response = ResponseEmitter(broken).emit(Outcome.info("a", "b"), make_context())

        assert response.kind is OutcomeKind.ERROR


class TestResponse:
    def test_description_without_icon(self):
        response = Response(
            kind=OutcomeKind.INFO, title="Title", body="Body", color=0, correlation_id="c"
        )

        assert response.description == "**Title**\nBody"

    def test_color_must_fit_24_bits(self):
        with pytest.raises(ValueError):
            Response(
                kind=OutcomeKind.INFO, title="t", body="b", color=0x1000000, correlation_id="c"
            )

    def test_fallback_response(self):
        response = fallback_response("abc")

        assert response.kind is OutcomeKind.ERROR
        assert response.footer == "Execution ID: abc"
