from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from music_session_pipeline.application.interfaces.voice_adapter import VoiceAdapter
from support import GUILD_ID, USER_ID, VOICE_CHANNEL_ID

# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def sample_item():
    """Create a sample media item for testing."""
    from music_session_pipeline.domain.music.entities import MediaItem

    return MediaItem(
        id="test-track-123",
        title="Test Track",
        webpage_url="https://youtube.com/watch?v=test123",
        duration_seconds=180,
        requested_by_id=USER_ID,
    )


@pytest.fixture
def queue(sample_item):
    """Create a live guild queue bound to the caller's channel."""
    from music_session_pipeline.domain.music.entities import GuildQueue

    q = GuildQueue(guild_id=GUILD_ID, channel_id=VOICE_CHANNEL_ID)
    q.enqueue(sample_item)
    return q


# ============================================================================
# Registry / Adapter Fixtures
# ============================================================================


@pytest.fixture
def session_registry():
    from music_session_pipeline.infrastructure.persistence.session_registry import (
        InMemorySessionRegistry,
    )

    return InMemorySessionRegistry()


@pytest.fixture
def voice_adapter():
    """Voice adapter reporting the bot in VOICE_CHANNEL_ID."""
    adapter = MagicMock(spec=VoiceAdapter)
    adapter.is_connected.return_value = True
    adapter.get_current_channel_id.return_value = VOICE_CHANNEL_ID
    adapter.disconnect = AsyncMock(return_value=True)
    return adapter


@pytest.fixture
def embed_settings():
    from music_session_pipeline.config.settings import EmbedSettings

    return EmbedSettings()


@pytest.fixture
def emitter(embed_settings):
    from music_session_pipeline.application.response import ResponseEmitter

    return ResponseEmitter(embed_settings)



# ============================================================================
# Pipeline Fixtures
# ============================================================================

SUPPORT_URL = "https://discord.gg/support"


@pytest.fixture
def leave_handler(voice_adapter):
    from music_session_pipeline.application.commands.leave import LeaveHandler

    return LeaveHandler(voice_adapter=voice_adapter)


@pytest.fixture
def loop_handler():
    from music_session_pipeline.application.commands.loop import LoopHandler

    return LoopHandler(support_url=SUPPORT_URL)


@pytest.fixture
def pipeline(session_registry, voice_adapter, emitter, leave_handler, loop_handler):
    """Pipeline wired with the in-memory registry and a mocked voice adapter."""
    from music_session_pipeline.application.pipeline import CommandPipeline

    return CommandPipeline(
        session_registry=session_registry,
        voice_adapter=voice_adapter,
        emitter=emitter,
        handlers=[leave_handler, loop_handler],
        support_url=SUPPORT_URL,
    )


@pytest_asyncio.fixture
async def registered_queue(session_registry, queue):
    """The sample queue registered under GUILD_ID."""
    await session_registry.put(GUILD_ID, queue)
    return queue
