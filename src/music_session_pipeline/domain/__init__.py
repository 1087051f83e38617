# ruff: noqa: N999
"""
Domain Layer

Contains pure business logic:
- shared/: Cross-cutting types, messages and exceptions
- music/: Queue state, repeat modes and the queue state machine
"""

from music_session_pipeline.domain.shared.exceptions import DomainError

__all__ = ["DomainError"]
