"""What Playground.register accepts."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from solid_playground.core.app import Playground


@runtime_checkable
class Module(Protocol):
    # bounded contexts and the event bus module both wire themselves in here
    def register_into(self, app: Playground) -> None:
        ...
