"""Logging setup for the playground.

Uses the standard library only. One managed handler is attached to the
root logger; module code calls ``get_logger(__name__)``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import ClassVar, Final, TextIO

RESET: Final[str] = "\033[0m"

DEBUG_COLOR: Final[str] = "\033[36m"
INFO_COLOR: Final[str] = "\033[32m"
WARNING_COLOR: Final[str] = "\033[33m"
ERROR_COLOR: Final[str] = "\033[1;31m"
CRITICAL_COLOR: Final[str] = "\033[1;35m"
LOGGER_COLOR: Final[str] = "\033[94m"

DEFAULT_LOGGER_NAME: Final[str] = "solid_playground"
ENV_LOG_LEVEL: Final[str] = "SOLID_LOG_LEVEL"
ENV_NO_COLOR: Final[str] = "NO_COLOR"
DEFAULT_LEVEL: Final[int] = logging.WARNING
DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT: Final[str] = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Formatter that adds ANSI colors to the level and logger name."""

    LEVEL_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": DEBUG_COLOR,
        "INFO": INFO_COLOR,
        "WARNING": WARNING_COLOR,
        "ERROR": ERROR_COLOR,
        "CRITICAL": CRITICAL_COLOR,
    }

    def format(self, record: logging.LogRecord) -> str:
        levelname_color = self.LEVEL_COLORS.get(record.levelname, "")

        orig_levelname = record.levelname
        orig_name = record.name

        record.levelname = f"{levelname_color}{record.levelname}{RESET}"
        record.name = f"{LOGGER_COLOR}{record.name}{RESET}"

        result = super().format(record)

        record.levelname = orig_levelname
        record.name = orig_name

        return result


class PlaygroundHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """StreamHandler subclass managed by the playground."""


def _has_playground_handler(root: logging.Logger) -> bool:
    return any(isinstance(handler, PlaygroundHandler) for handler in root.handlers)


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        override = os.getenv(ENV_LOG_LEVEL)
        if override:
            level = override
        else:
            return DEFAULT_LEVEL

    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(str(level).upper())
    if isinstance(resolved, int):
        return resolved
    return DEFAULT_LEVEL


def setup_logger(
    *,
    level: int | str | None = None,
    use_color: bool | None = None,
    stream: TextIO | None = None,
    fmt: str | None = None,
    datefmt: str | None = DEFAULT_DATEFMT,
    force: bool = False,
) -> None:
    """Configure the root logger.

    Args:
        level: Override the log level. Falls back to ``SOLID_LOG_LEVEL`` then
            ``WARNING``.
        use_color: Enable colored output. Defaults to ``True`` unless the
            ``NO_COLOR`` env var is set.
        stream: Stream for the handler; stderr by default.
        fmt: Format string.
        datefmt: Date format.
        force: Reconfigure even if the playground handler is already attached.
    """
    root = logging.getLogger()

    if _has_playground_handler(root) and not force:
        return

    if force:
        for handler in list(root.handlers):
            if isinstance(handler, PlaygroundHandler):
                root.removeHandler(handler)
                handler.close()

    resolved_level = _resolve_level(level)
    root.setLevel(resolved_level)

    if use_color is not None:
        resolved_use_color = use_color
    elif os.getenv(ENV_NO_COLOR):
        resolved_use_color = False
    else:
        resolved_use_color = True

    handler = PlaygroundHandler(stream or sys.stderr)
    handler.setLevel(resolved_level)

    formatter: logging.Formatter
    if resolved_use_color:
        formatter = ColoredFormatter(fmt or DEFAULT_FORMAT, datefmt=datefmt)
    else:
        formatter = logging.Formatter(fmt or DEFAULT_FORMAT, datefmt=datefmt)

    handler.setFormatter(formatter)
    root.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module logger. Configuration is left to ``setup_logger``."""
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)


__all__ = [
    "DEFAULT_LOGGER_NAME",
    "ColoredFormatter",
    "PlaygroundHandler",
    "get_logger",
    "setup_logger",
]
