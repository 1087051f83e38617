"""Inbound command and per-invocation correlation context."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from music_session_pipeline.domain.shared.types import (
    ChannelIdField,
    GuildIdField,
    HttpUrlStr,
    NonEmptyStr,
    UserIdField,
)

if TYPE_CHECKING:
    from ..domain.music.entities import GuildQueue

OptionValue = str | int | float | bool | None


class Caller(BaseModel):
    """The member who invoked a command, as seen at invocation time."""

    model_config = ConfigDict(frozen=True)

    user_id: UserIdField
    display_name: NonEmptyStr
    avatar_url: HttpUrlStr | None = None
    voice_channel_id: ChannelIdField | None = None

    @property
    def in_voice(self) -> bool:
        return self.voice_channel_id is not None


class InboundCommand(BaseModel):
    """A command delivered by the transport with options already coerced."""

    model_config = ConfigDict(frozen=True)

    name: NonEmptyStr
    session_key: GuildIdField
    caller: Caller
    options: dict[str, OptionValue] = Field(default_factory=dict)

    def option(self, key: str, default: OptionValue = None) -> OptionValue:
        return self.options.get(key, default)


def new_correlation_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class CorrelationContext:
    """Everything a validator, handler and emitter need for one invocation.

    ``queue`` is the live queue object resolved from the registry, not a copy,
    so reads always reflect its current state.
    """

    correlation_id: str
    command: InboundCommand
    queue: GuildQueue | None = None
    bot_channel_id: int | None = None

    @property
    def caller(self) -> Caller:
        return self.command.caller

    @property
    def session_key(self) -> int:
        return self.command.session_key

    @property
    def command_name(self) -> str:
        return self.command.name
