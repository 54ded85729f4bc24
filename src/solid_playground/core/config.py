"""Single config object: built from the environment, registered in the container by Playground(config=...)."""
from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


class Config:
    """
    Config helpers. User creates their own class or instance
    and passes it to Playground(config=...); then available via container.resolve(type(config)).
    """

    @classmethod
    def load_from_env(cls, prefix: str = "SOLID_", **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for MyConfig(**Config.load_from_env())."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


def _default_log_file() -> Path:
    return Path(tempfile.gettempdir()) / "solid_playground.log"


@dataclass
class PlaygroundSettings:
    """Settings for the pages and the CLI."""

    log_level: str = "WARNING"
    log_file: Path = field(default_factory=_default_log_file)
    opening_balance: float = 1000.0

    @classmethod
    def from_env(cls, prefix: str = "SOLID_") -> PlaygroundSettings:
        """SOLID_LOG_LEVEL, SOLID_LOG_FILE, SOLID_OPENING_BALANCE; unknown SOLID_* keys are ignored."""
        raw = Config.load_from_env(prefix)
        settings = cls()
        if "log_level" in raw:
            settings.log_level = str(raw["log_level"]).upper()
        if "log_file" in raw:
            settings.log_file = Path(raw["log_file"])
        if "opening_balance" in raw:
            value = raw["opening_balance"]
            try:
                balance = float(value)
            except ValueError as exc:
                raise ValueError(f"{prefix}OPENING_BALANCE must be a non-negative number, got {value!r}") from exc
            # NaN fails this comparison too
            if not balance >= 0:
                raise ValueError(f"{prefix}OPENING_BALANCE must be a non-negative number, got {value!r}")
            settings.opening_balance = balance
        return settings
