"""Users domain: the logging abstraction the user service depends on."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """Logging strategy. Implementations may write to a sink; sink failures propagate as OSError."""

    key: str

    def log(self, message: str) -> None:
        ...
