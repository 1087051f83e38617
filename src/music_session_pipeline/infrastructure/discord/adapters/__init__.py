"""Discord implementations of application ports."""

from music_session_pipeline.infrastructure.discord.adapters.voice_adapter import (
    DiscordVoiceAdapter,
)

__all__ = ["DiscordVoiceAdapter"]
