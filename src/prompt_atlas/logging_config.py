"""Logging configuration for the Prompt Atlas CLI.

Log lines carry a bracketed stage prefix (``[FETCH]``, ``[PARSER]``,
``[SYNC]``). On a terminal the level and the prefix are colored; when stderr
is redirected, ``NO_COLOR`` is set or the caller asks for plain output, the
same lines are written without ANSI codes.
"""

import logging
import os
import re
import sys
from typing import Optional, TextIO

RESET = "\033[0m"
BOLD = "\033[1m"

LEVEL_COLORS = {
    "DEBUG": "\033[36m",      # Cyan
    "INFO": "\033[32m",       # Green
    "WARNING": "\033[33m",    # Yellow
    "ERROR": "\033[31m",      # Red
    "CRITICAL": "\033[35m",   # Magenta
}

STAGE_COLORS = {
    "FETCH": "\033[96m",      # Bright Cyan
    "PARSER": "\033[97m",     # Bright White
    "SYNC": "\033[94m",       # Bright Blue
}

STAGE_PREFIX_PATTERN = re.compile(r"\[(" + "|".join(STAGE_COLORS) + r")\]")

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Third-party loggers that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


class ColoredFormatter(logging.Formatter):
    """Formatter that pads the level name and colors it and the stage prefix."""

    def __init__(self, fmt: str = LOG_FORMAT, datefmt: str = DATE_FORMAT, use_color: bool = True):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname
        original_msg = record.msg

        if self.use_color:
            record.levelname = f"{LEVEL_COLORS.get(record.levelname, '')}{record.levelname:<7}{RESET}"
            if isinstance(record.msg, str):
                record.msg = STAGE_PREFIX_PATTERN.sub(
                    lambda m: f"{STAGE_COLORS[m.group(1)]}{BOLD}{m.group(0)}{RESET}", record.msg
                )
        else:
            record.levelname = f"{record.levelname:<7}"

        try:
            return super().format(record)
        finally:
            # The record is shared with any other handler
            record.levelname = original_levelname
            record.msg = original_msg


def should_use_color(stream: TextIO, color: Optional[bool] = None) -> bool:
    """Decide whether to emit ANSI codes on ``stream``.

    An explicit ``color`` wins; otherwise color is used only on a TTY and only
    when ``NO_COLOR`` is unset.
    """
    if color is not None:
        return color
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def setup_colored_logging(verbose: bool = False, color: Optional[bool] = None) -> None:
    """Configure root logging for the CLI.

    Logs go to stderr so that ``--json`` output on stdout stays parseable.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise INFO.
        color: Force color on or off. ``None`` detects it from stderr.
    """
    stream = sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColoredFormatter(use_color=should_use_color(stream, color)))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    for existing_handler in root_logger.handlers[:]:
        root_logger.removeHandler(existing_handler)
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
