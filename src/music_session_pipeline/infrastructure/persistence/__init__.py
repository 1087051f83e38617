"""Session storage implementations."""

from music_session_pipeline.infrastructure.persistence.session_registry import (
    InMemorySessionRegistry,
)

__all__ = ["InMemorySessionRegistry"]
