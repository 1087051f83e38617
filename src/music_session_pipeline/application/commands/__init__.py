"""
Application Commands

One handler per slash command. Handlers assume the pipeline already ran
their validators and return a single :class:`Outcome`.
"""

from music_session_pipeline.application.commands.base import CommandHandler
from music_session_pipeline.application.commands.leave import LeaveHandler
from music_session_pipeline.application.commands.loop import LoopHandler

__all__ = [
    "CommandHandler",
    "LeaveHandler",
    "LoopHandler",
]
