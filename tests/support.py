"""Shared constants and builders for pipeline tests."""

from music_session_pipeline.application.context import (
    Caller,
    CorrelationContext,
    InboundCommand,
)

GUILD_ID = 111
USER_ID = 222
VOICE_CHANNEL_ID = 333
OTHER_CHANNEL_ID = 444
AVATAR_URL = "https://cdn.discordapp.com/avatars/222/abc.png"


def make_caller(voice_channel_id: int | None = VOICE_CHANNEL_ID) -> Caller:
    return Caller(
        user_id=USER_ID,
        display_name="TestUser",
        avatar_url=AVATAR_URL,
        voice_channel_id=voice_channel_id,
    )


def make_command(
    name: str = "loop",
    *,
    mode: int | None = None,
    voice_channel_id: int | None = VOICE_CHANNEL_ID,
) -> InboundCommand:
    options = {} if mode is None else {"mode": mode}
    return InboundCommand(
        name=name,
        session_key=GUILD_ID,
        caller=make_caller(voice_channel_id),
        options=options,
    )


def make_context(
    queue=None,
    *,
    name: str = "loop",
    mode: int | None = None,
    voice_channel_id: int | None = VOICE_CHANNEL_ID,
    bot_channel_id: int | None = VOICE_CHANNEL_ID,
    correlation_id: str = "exec-1234",
) -> CorrelationContext:
    return CorrelationContext(
        correlation_id=correlation_id,
        command=make_command(name, mode=mode, voice_channel_id=voice_channel_id),
        queue=queue,
        bot_channel_id=bot_channel_id,
    )
