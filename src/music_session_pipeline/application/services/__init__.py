"""Application services for session orchestration."""

from music_session_pipeline.application.services.session_lifecycle import (
    SessionLifecycleService,
)

__all__ = ["SessionLifecycleService"]
