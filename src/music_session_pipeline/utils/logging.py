"""Colored logging formatter for console output."""

from __future__ import annotations

import logging
import os
import re
import sys

_CORRELATION_TAG = re.compile(r"^\[([0-9a-f-]{8,})\]")


class ColoredFormatter(logging.Formatter):
    """Logging formatter that colors the levelname and dims pipeline correlation tags.

    Pipeline log lines start with ``[<correlation id>]``; the tag is rendered
    dim so the message stays readable. Colors are disabled when ``NO_COLOR``
    is set or the output stream is not a TTY.
    """

    COLORS: dict[int, str] = {
        logging.DEBUG: "\033[36m",     # cyan
        logging.INFO: "\033[32m",      # green
        logging.WARNING: "\033[33m",   # yellow
        logging.ERROR: "\033[31m",     # red
        logging.CRITICAL: "\033[1;31m",  # bold red
    }
    DIM = "\033[2m"
    RESET = "\033[0m"

    def _use_color(self) -> bool:
        if os.environ.get("NO_COLOR") is not None:
            return False
        stream = getattr(self, "_stream", None) or sys.stdout
        return hasattr(stream, "isatty") and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if self._use_color():
            color = self.COLORS.get(record.levelno, "")
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
            record.msg = _CORRELATION_TAG.sub(
                lambda m: f"{self.DIM}[{m.group(1)}]{self.RESET}", record.getMessage(), count=1
            )
            record.args = None
        return super().format(record)
