"""Terminal result of a command invocation."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class OutcomeKind(StrEnum):
    """Severity classification shown to the caller."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    title: str
    message: str
    icon: str | None = None
    reason: str | None = None
    show_author: bool = False

    @property
    def is_success(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.kind == OutcomeKind.ERROR

    @classmethod
    def success(cls, title: str, message: str, *, icon: str = "success") -> Outcome:
        return cls(
            kind=OutcomeKind.SUCCESS, title=title, message=message, icon=icon, show_author=True
        )

    @classmethod
    def info(cls, title: str, message: str, *, icon: str = "info") -> Outcome:
        return cls(kind=OutcomeKind.INFO, title=title, message=message, icon=icon)

    @classmethod
    def warning(
        cls, title: str, message: str, *, reason: str | None = None, icon: str = "warning"
    ) -> Outcome:
        return cls(kind=OutcomeKind.WARNING, title=title, message=message, icon=icon, reason=reason)

    @classmethod
    def error(cls, title: str, message: str, *, reason: str | None = None) -> Outcome:
        return cls(kind=OutcomeKind.ERROR, title=title, message=message, icon="error", reason=reason)
