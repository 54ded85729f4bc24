"""
EventBusModule — building block for the event bus.
Configure via .adapter(...) or .in_memory(); register with app.register(event_bus)
before the domain modules that subscribe to it.
"""
from __future__ import annotations

from solid_playground.core.app import Playground
from solid_playground.core.module import Module
from solid_playground.domain.events import EventBus, InProcessEventDispatcher


class EventBusModule(Module):
    """
    Event bus as object: one adapter (in-memory or user-provided).
    Register via app.register(event_bus). Available in container as EventBus.
    """

    name = "event_bus"

    def __init__(self) -> None:
        self._adapter: EventBus | None = None

    def adapter(self, impl: EventBus) -> EventBusModule:
        """Use custom implementation (protocol: publish, subscribe)."""
        if not isinstance(impl, EventBus):
            raise TypeError(f"{type(impl).__name__} does not implement publish/subscribe")
        self._adapter = impl
        return self

    def in_memory(self) -> EventBusModule:
        """In-process dispatcher out of the box."""
        self._adapter = InProcessEventDispatcher()
        return self

    def register_into(self, app: Playground) -> None:
        if self._adapter is None:
            self._adapter = InProcessEventDispatcher()
        app.container.register_instance(EventBus, self._adapter)
        if isinstance(self._adapter, InProcessEventDispatcher):
            app.container.register_instance(InProcessEventDispatcher, self._adapter)
