"""Port interfaces implemented by the infrastructure layer."""

from music_session_pipeline.application.interfaces.voice_adapter import VoiceAdapter

__all__ = ["VoiceAdapter"]
