"""A high-level service that builds its own low-level logger."""
from __future__ import annotations

import os

from .infrastructure import FileLogger


class HardwiredUserService:
    """Switching to another logger, or testing without a file, means editing this class."""

    def __init__(self, log_path: str | os.PathLike[str]) -> None:
        self._logger = FileLogger(log_path)

    def create_user(self, name: str) -> str:
        self._logger.log(f"User {name} Created.")
        return name
