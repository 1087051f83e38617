"""Precondition validators and the chain that runs them."""

from music_session_pipeline.application.validation.chain import ValidatorChain
from music_session_pipeline.application.validation.validators import (
    QUEUE_COMMAND_VALIDATORS,
    FailureReason,
    ValidationResult,
    Validator,
    check_in_voice_channel,
    check_queue_exists,
    check_same_voice_channel,
)

__all__ = [
    "ValidatorChain",
    "Validator",
    "ValidationResult",
    "FailureReason",
    "QUEUE_COMMAND_VALIDATORS",
    "check_in_voice_channel",
    "check_same_voice_channel",
    "check_queue_exists",
]
