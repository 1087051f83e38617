#!/usr/bin/env python3
"""Entry point for the music session bot."""

from __future__ import annotations

import json
import logging
import logging.config
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from music_session_pipeline.domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from music_session_pipeline.config.settings import Settings

LOGGING_CONFIG_FILE = Path(__file__).resolve().parents[2] / "logging_config.json"
FALLBACK_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _read_logging_config() -> dict[str, Any] | None:
    try:
        with open(LOGGING_CONFIG_FILE) as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return None


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging from ``logging_config.json`` and apply ``log_level`` to the root."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    config = _read_logging_config()
    configured = False
    if config is not None:
        try:
            logging.config.dictConfig(config)
            configured = True
        except ValueError:
            pass

    if not configured:
        logging.basicConfig(level=level, format=FALLBACK_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        logger = logging.getLogger(__name__)
        logger.warning(LogTemplates.LOGGING_CONFIG_FALLBACK, LOGGING_CONFIG_FILE)

    logging.getLogger().setLevel(level)


def _run(settings: Settings, token: str) -> int:
    from music_session_pipeline.config.container import create_container
    from music_session_pipeline.infrastructure.discord.bot import create_bot

    logger = logging.getLogger(__name__)
    bot = create_bot(create_container(settings), settings)

    logger.info(LogTemplates.BOT_STARTING_RUN)
    try:
        # discord.py installs its own handler unless told otherwise
        bot.run(token, log_handler=None)
    except KeyboardInterrupt:
        logger.info(LogTemplates.BOT_KEYBOARD_INTERRUPT)
    except Exception as e:
        logger.exception(LogTemplates.BOT_FATAL_ERROR, e)
        return 1

    logger.info(LogTemplates.BOT_STOPPED)
    return 0


def main() -> int:
    from music_session_pipeline.config.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    token = settings.discord.token.get_secret_value()
    if not token:
        logger.error(ErrorMessages.DISCORD_TOKEN_REQUIRED)
        return 1

    logger.info(LogTemplates.BOT_STARTING.format(environment=settings.environment))
    return _run(settings, token)


def cli() -> None:
    """Console script entry point (``music-session-pipeline``)."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
