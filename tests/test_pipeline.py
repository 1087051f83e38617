"""
Integration Tests for the Command Pipeline

Drives InboundCommands through lookup, validation, handlers and the emitter
with the in-memory registry and a mocked voice adapter.
"""

import asyncio
import gc
import logging

import pytest

from music_session_pipeline.application.commands.base import CommandHandler
from music_session_pipeline.application.outcome import Outcome, OutcomeKind
from music_session_pipeline.application.pipeline import CommandPipeline, SessionLocks
from music_session_pipeline.domain.music.value_objects import RepeatMode
from music_session_pipeline.domain.shared.messages import CommandMessages, ValidationMessages
from support import GUILD_ID, OTHER_CHANNEL_ID, VOICE_CHANNEL_ID, make_command


class RecordingHandler(CommandHandler):
    """Yields to the loop mid-handle so interleaving is observable."""

    name = "record"
    validators = ()

    def __init__(self) -> None:
        self.events: list[str] = []

    async def handle(self, context):
        self.events.append(f"start:{context.correlation_id}")
        await asyncio.sleep(0)
        self.events.append(f"end:{context.correlation_id}")
        return Outcome.info("Recorded", context.correlation_id)


class ExplodingHandler(CommandHandler):
    name = "explode"
    validators = ()

    async def handle(self, context):
        raise RuntimeError("engine crashed")


def _pipeline(session_registry, voice_adapter, emitter, handler, **kwargs):
    return CommandPipeline(
        session_registry=session_registry,
        voice_adapter=voice_adapter,
        emitter=emitter,
        handlers=[handler],
        support_url="https://discord.gg/support",
        **kwargs,
    )


# =============================================================================
# Scenarios
# =============================================================================


class TestLoopScenarios:
    """End-to-end /loop behaviour."""

    @pytest.mark.asyncio
    async def test_no_mode_reports_queue(self, pipeline, registered_queue):
        registered_queue.set_repeat_mode(RepeatMode.QUEUE)

        response = await pipeline.execute(make_command("loop"))

        assert response.kind is OutcomeKind.INFO
        assert "**`queue`**" in response.body
        assert response.footer is None
        assert registered_queue.repeat_mode is RepeatMode.QUEUE

    @pytest.mark.asyncio
    async def test_same_mode_warns_already_set(self, pipeline, registered_queue):
        registered_queue.set_repeat_mode(RepeatMode.TRACK)

        response = await pipeline.execute(make_command("loop", mode=1))

        assert response.kind is OutcomeKind.WARNING
        assert response.title == CommandMessages.LOOP_ALREADY_SET_TITLE
        assert registered_queue.repeat_mode is RepeatMode.TRACK

    @pytest.mark.asyncio
    async def test_disable_from_autoplay(self, pipeline, registered_queue):
        registered_queue.set_repeat_mode(RepeatMode.AUTOPLAY)

        response = await pipeline.execute(make_command("loop", mode=0))

        assert response.kind is OutcomeKind.SUCCESS
        assert registered_queue.repeat_mode is RepeatMode.DISABLED
        assert response.author_name == "TestUser"

    @pytest.mark.asyncio
    async def test_loop_after_leave_reports_no_queue(self, pipeline, registered_queue):
        await pipeline.execute(make_command("leave"))

        response = await pipeline.execute(make_command("loop", mode=1))

        assert response.kind is OutcomeKind.WARNING
        assert response.body == ValidationMessages.NO_QUEUE_BODY

    @pytest.mark.asyncio
    async def test_loop_without_mode_after_leave_reports_no_queue(
        self, pipeline, registered_queue
    ):
        await pipeline.execute(make_command("leave"))

        response = await pipeline.execute(make_command("loop"))

        assert response.kind is OutcomeKind.WARNING
        assert response.title == ValidationMessages.NO_QUEUE_TITLE
        assert response.body == ValidationMessages.NO_QUEUE_BODY


class TestLeaveScenarios:
    """End-to-end /leave behaviour."""

    @pytest.mark.asyncio
    async def test_leave_twice_succeeds_both_times(
        self, pipeline, registered_queue, voice_adapter
    ):
        first = await pipeline.execute(make_command("leave"))
        voice_adapter.is_connected.return_value = False
        voice_adapter.get_current_channel_id.return_value = None
        second = await pipeline.execute(make_command("leave"))

        assert first.kind is OutcomeKind.SUCCESS
        assert second.kind is OutcomeKind.SUCCESS
        assert registered_queue.deleted is True
        voice_adapter.disconnect.assert_awaited_once_with(GUILD_ID)

    @pytest.mark.asyncio
    async def test_leave_without_session(self, pipeline):
        response = await pipeline.execute(make_command("leave"))

        assert response.kind is OutcomeKind.WARNING
        assert response.title == ValidationMessages.NO_QUEUE_TITLE


# =============================================================================
# Validation
# =============================================================================


class TestPipelineValidation:
    @pytest.mark.asyncio
    async def test_caller_not_in_voice_short_circuits(
        self, pipeline, registered_queue, voice_adapter
    ):
        response = await pipeline.execute(make_command("leave", voice_channel_id=None))

        assert response.kind is OutcomeKind.WARNING
        assert response.title == ValidationMessages.NOT_IN_VOICE_TITLE
        assert registered_queue.deleted is False
        voice_adapter.disconnect.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_caller_in_other_channel(self, pipeline, registered_queue):
        response = await pipeline.execute(
            make_command("loop", mode=2, voice_channel_id=OTHER_CHANNEL_ID)
        )

        assert response.kind is OutcomeKind.WARNING
        assert response.title == ValidationMessages.NOT_SAME_CHANNEL_TITLE
        assert registered_queue.repeat_mode is RepeatMode.DISABLED

    @pytest.mark.asyncio
    async def test_warning_has_no_footer(self, pipeline):
        response = await pipeline.execute(make_command("loop"))

        assert response.footer is None


# =============================================================================
# Errors
# =============================================================================


class TestPipelineErrors:
    @pytest.mark.asyncio
    async def test_unhandled_exception_becomes_error(
        self, session_registry, voice_adapter, emitter, caplog
    ):
        pipeline = _pipeline(session_registry, voice_adapter, emitter, ExplodingHandler())

        with caplog.at_level(logging.ERROR):
            response = await pipeline.execute(make_command("explode"), correlation_id="cid-42")

        assert response.kind is OutcomeKind.ERROR
        assert response.title == CommandMessages.UNEXPECTED_ERROR_TITLE
        assert response.footer == "Execution ID: cid-42"
        assert "cid-42" in caplog.text
        assert "engine crashed" in caplog.text

    @pytest.mark.asyncio
    async def test_unknown_command(self, pipeline):
        response = await pipeline.execute(make_command("shuffle"))

        assert response.kind is OutcomeKind.WARNING
        assert "/shuffle" in response.body

    @pytest.mark.asyncio
    async def test_correlation_id_generated(self, pipeline):
        first = await pipeline.execute(make_command("loop"))
        second = await pipeline.execute(make_command("loop"))

        assert first.correlation_id
        assert first.correlation_id != second.correlation_id

    def test_command_names(self, pipeline):
        assert pipeline.command_names == ["leave", "loop"]


# =============================================================================
# Per-session serialization
# =============================================================================


class TestSessionSerialization:
    @pytest.mark.asyncio
    async def test_same_session_runs_one_at_a_time(
        self, session_registry, voice_adapter, emitter
    ):
        handler = RecordingHandler()
        pipeline = _pipeline(session_registry, voice_adapter, emitter, handler)

        await asyncio.gather(
            pipeline.execute(make_command("record"), correlation_id="a"),
            pipeline.execute(make_command("record"), correlation_id="b"),
        )

        assert handler.events == ["start:a", "end:a", "start:b", "end:b"]

    @pytest.mark.asyncio
    async def test_interleaves_when_disabled(self, session_registry, voice_adapter, emitter):
        handler = RecordingHandler()
        pipeline = _pipeline(
            session_registry, voice_adapter, emitter, handler, serialize_sessions=False
        )

        await asyncio.gather(
            pipeline.execute(make_command("record"), correlation_id="a"),
            pipeline.execute(make_command("record"), correlation_id="b"),
        )

        assert handler.events == ["start:a", "start:b", "end:a", "end:b"]

    @pytest.mark.asyncio
    async def test_bot_channel_is_read_after_waiting_for_the_lock(
        self, pipeline, registered_queue, voice_adapter
    ):
        """A loop queued behind a leave sees the bot already gone from voice."""
        bot_channel = {GUILD_ID: VOICE_CHANNEL_ID}
        voice_adapter.get_current_channel_id.side_effect = bot_channel.get

        async def disconnect(guild_id):
            bot_channel[guild_id] = None
            await asyncio.sleep(0)
            return True

        voice_adapter.disconnect.side_effect = disconnect

        leave, loop = await asyncio.gather(
            pipeline.execute(make_command("leave")),
            pipeline.execute(make_command("loop", mode=1, voice_channel_id=OTHER_CHANNEL_ID)),
        )

        assert leave.kind is OutcomeKind.SUCCESS
        assert loop.kind is OutcomeKind.WARNING
        assert loop.title == ValidationMessages.NO_QUEUE_TITLE


class TestSessionLocks:
    def test_same_guild_shares_a_lock(self):
        locks = SessionLocks()

        lock = locks.get(GUILD_ID)

        assert locks.get(GUILD_ID) is lock
        assert locks.get(GUILD_ID + 1) is not lock

    def test_unused_locks_are_dropped(self):
        locks = SessionLocks()
        lock = locks.get(GUILD_ID)
        assert len(locks) == 1

        del lock
        gc.collect()

        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_pipeline_keeps_no_lock_after_a_command(
        self, session_registry, voice_adapter, emitter
    ):
        pipeline = _pipeline(session_registry, voice_adapter, emitter, RecordingHandler())

        await pipeline.execute(make_command("record"))
        gc.collect()

        assert len(pipeline._locks) == 0
