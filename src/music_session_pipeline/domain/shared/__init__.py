"""
Shared Domain Kernel

Contains types, messages and exceptions shared across the domain.
"""

from music_session_pipeline.domain.shared.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    SessionNotFoundError,
)

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "SessionNotFoundError",
    "BusinessRuleViolationError",
]
