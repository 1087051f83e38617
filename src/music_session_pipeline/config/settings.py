"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import HexColorInt
from ..domain.shared.validators import validate_discord_snowflake


class DiscordSettings(BaseModel):
    """Discord bot configuration."""

    model_config = SettingsConfigDict(frozen=True, strict=True, populate_by_name=True)

    token: SecretStr = Field(
        default=SecretStr(""), validation_alias=AliasChoices("token", "bot_token", "discord_token")
    )
    command_prefix: str = Field(
        default="!",
        min_length=1,
        max_length=5,
        validation_alias=AliasChoices("command_prefix", "prefix"),
    )
    guild_ids: tuple[int, ...] = Field(
        default_factory=tuple, validation_alias=AliasChoices("guild_ids", "guilds")
    )
    sync_on_startup: bool = False

    @field_validator("guild_ids", mode="before")
    @classmethod
    def validate_snowflake_ids(cls, v: tuple[int, ...] | list[int]) -> tuple[int, ...]:
        """Validate Discord snowflake IDs and convert lists to tuples."""
        if isinstance(v, list):
            v = tuple(v)
        for snowflake in v:
            validate_discord_snowflake(snowflake)
        return v


class EmbedColorSettings(BaseModel):
    """Embed side-bar colors per outcome kind."""

    model_config = SettingsConfigDict(frozen=True, strict=True)

    success: HexColorInt = 0x23A55A
    info: HexColorInt = 0x5865F2
    warning: HexColorInt = 0xF0B232
    error: HexColorInt = 0xF23F43


class EmbedIconSettings(BaseModel):
    """Emoji prefixed to embed titles."""

    model_config = SettingsConfigDict(frozen=True, strict=True)

    success: str = "✅"
    info: str = "ℹ️"
    warning: str = "⚠️"
    error: str = "❌"
    loop: str = "🔁"
    looping: str = "🔁"
    autoplay: str = "♾️"
    autoplaying: str = "♾️"


class EmbedSettings(BaseModel):
    """Response presentation configuration."""

    model_config = SettingsConfigDict(frozen=True, strict=True)

    colors: EmbedColorSettings = Field(default_factory=EmbedColorSettings)
    icons: EmbedIconSettings = Field(default_factory=EmbedIconSettings)


class BotSettings(BaseModel):
    """Links and labels shown to users."""

    model_config = SettingsConfigDict(frozen=True, strict=True, populate_by_name=True)

    server_invite_url: str = Field(
        default="https://discord.gg/",
        validation_alias=AliasChoices("server_invite_url", "support_url"),
    )


class PipelineSettings(BaseModel):
    """Command pipeline behaviour."""

    model_config = SettingsConfigDict(frozen=True, strict=True)

    serialize_sessions: bool = True


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - DISCORD__TOKEN, DISCORD__GUILD_IDS, etc. (nested with ``__``)
    - EMBEDS__COLORS__ERROR, EMBEDS__ICONS__LOOP, ...
    - BOT__SERVER_INVITE_URL
    - PIPELINE__SERIALIZE_SESSIONS
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        strict=True,
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    discord: DiscordSettings = Field(default_factory=DiscordSettings)
    embeds: EmbedSettings = Field(default_factory=EmbedSettings)
    bot: BotSettings = Field(default_factory=BotSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
