"""Users: logging strategy implementations."""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO

from solid_playground.strategies import StrategyRegistry

from .domain import Logger


class ConsoleLogger:
    key = "console"

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def log(self, message: str) -> None:
        print(f"Logging message to console: {message}", file=self._stream or sys.stdout)


class FileLogger:
    """Appends one line per message to a file, opened per call."""

    key = "file"

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def log(self, message: str) -> None:
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(f"Logging message to file: {message}\n")


def default_loggers(path: str | os.PathLike[str], stream: TextIO | None = None) -> StrategyRegistry[Logger]:
    return StrategyRegistry([ConsoleLogger(stream), FileLogger(path)])
