"""Domain events: base type, bus protocol and the in-process dispatcher."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from solid_playground.errors import EventDeliveryError
from solid_playground.utils.logger import get_logger

logger = get_logger(__name__)


@runtime_checkable
class EventBus(Protocol):
    """Event bus protocol: publish and subscribe. Implementation by user or EventBusModule."""

    def publish(self, event: DomainEvent) -> None:
        ...

    def subscribe(self, event_type: type[DomainEvent], handler: Callable[[Any], Any]) -> None:
        ...


@dataclass(frozen=True)
class DomainEvent:
    """Frozen dataclass subclasses carry the event fields."""
    pass


class InProcessEventDispatcher:
    """Dispatcher: subscribe by event type, publish invokes handlers synchronously in subscription order."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[Any], Any]]] = {}

    def subscribe(self, event_type: type[DomainEvent], handler: Callable[[Any], Any]) -> None:
        if not callable(handler):
            raise TypeError(f"Handler for {event_type.__name__} is not callable: {handler!r}")
        self._handlers.setdefault(event_type, []).append(handler)

    def publish(self, event: DomainEvent) -> None:
        """Call every handler; failures are raised together once all handlers have run."""
        handlers = self._handlers.get(type(event), [])
        logger.debug("publishing %s to %d handler(s)", type(event).__name__, len(handlers))
        errors: list[Exception] = []
        for handler in handlers:
            try:
                handler(event)
            except Exception as exc:
                logger.error("handler %r failed for %s: %s", handler, type(event).__name__, exc)
                errors.append(exc)
        if errors:
            raise EventDeliveryError(event, errors) from errors[0]
