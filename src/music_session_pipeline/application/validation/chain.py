"""Runs validators in declared order and stops at the first rejection."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from music_session_pipeline.application.context import CorrelationContext
from music_session_pipeline.application.validation.validators import (
    ValidationResult,
    Validator,
)
from music_session_pipeline.domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)


class ValidatorChain:
    def __init__(self, validators: Sequence[Validator]) -> None:
        self._validators = tuple(validators)

    @property
    def validators(self) -> tuple[Validator, ...]:
        return self._validators

    def __len__(self) -> int:
        return len(self._validators)

    async def run(self, context: CorrelationContext) -> ValidationResult:
        """Return the first failing result, or a passing one if every check holds."""
        for validator in self._validators:
            result = await validator(context)
            if not result.passed:
                logger.info(
                    LogTemplates.PIPELINE_VALIDATION_FAILED,
                    context.correlation_id,
                    context.command_name,
                    result.reason.value if result.reason else "unknown",
                )
                return result
        return ValidationResult.ok()
