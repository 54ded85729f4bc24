"""
DomainModule — one object per bounded context.
Describes repository, bindings, commands, queries, event subscriptions.
"""
from __future__ import annotations

from typing import Any, Callable, Type

from solid_playground.core.app import Playground
from solid_playground.core.container import Container
from solid_playground.core.module import Module
from solid_playground.domain import Repository
from solid_playground.domain.events import EventBus, InProcessEventDispatcher
from solid_playground.ddd.commands import Command, Query
from solid_playground.utils.logger import get_logger

logger = get_logger(__name__)


class DomainModule(Module):
    """
    One object = full bounded context.
    .repository() .bind() .instance() .command() .query() .on_event()
    Register via app.register(module).
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._repositories: list[tuple[Type[Repository[Any]], Type[Any]]] = []
        self._bindings: list[tuple[Type[Any], Type[Any]]] = []
        self._instances: list[tuple[Type[Any], Any]] = []
        self._commands: list[tuple[Type[Command], Type[Any] | Callable[..., Any]]] = []
        self._queries: list[tuple[Type[Query], Type[Any] | Callable[..., Any]]] = []
        self._event_handlers: list[tuple[type, Any]] = []

    def repository(self, interface: Type[Repository[Any]], impl: Type[Any]) -> DomainModule:
        self._repositories.append((interface, impl))
        return self

    def bind(self, interface: Type[Any], impl: Type[Any]) -> DomainModule:
        """Register any interface → implementation for DI (e.g. domain services, strategies)."""
        self._bindings.append((interface, impl))
        return self

    def instance(self, interface: Type[Any], obj: Any) -> DomainModule:
        """Register a ready-made collaborator (e.g. a sink writing to a given stream)."""
        self._instances.append((interface, obj))
        return self

    def command(self, cmd_type: Type[Command], handler: Type[Any] | Callable[..., Any]) -> DomainModule:
        self._commands.append((cmd_type, handler))
        return self

    def query(self, query_type: Type[Query], handler: Type[Any] | Callable[..., Any]) -> DomainModule:
        self._queries.append((query_type, handler))
        return self

    def on_event(self, event_type: type, handler: Any) -> DomainModule:
        """Subscribe a callable, or a class resolved from the container on first event."""
        self._event_handlers.append((event_type, handler))
        return self

    def register_into(self, app: Playground) -> None:
        container = app.container

        # Repositories: interface -> implementation
        for iface, impl in self._repositories:
            container.register_class(impl)
            container.register(iface, lambda c=container, i=impl: c.resolve(i))

        # Arbitrary bindings (domain services, strategies, adapters)
        for iface, impl in self._bindings:
            container.register_class(impl)
            if iface is not impl:
                container.register(iface, lambda c=container, i=impl: c.resolve(i))

        for iface, obj in self._instances:
            container.register_instance(iface, obj)

        # EventBus: if already registered (e.g. EventBusModule), use it; else default in-process
        if container.has(EventBus):
            event_bus = container.resolve(EventBus)
        else:
            event_bus = InProcessEventDispatcher()
            container.register_instance(EventBus, event_bus)
            container.register_instance(InProcessEventDispatcher, event_bus)
        for event_type, handler in self._event_handlers:
            event_bus.subscribe(event_type, self._make_event_endpoint(handler, container))

        for cmd_type, handler in self._commands:
            if isinstance(handler, type):
                container.register_class(handler)
            app.add_command(cmd_type, self._make_endpoint(handler, container))

        for query_type, handler in self._queries:
            if isinstance(handler, type):
                container.register_class(handler)
            app.add_query(query_type, self._make_endpoint(handler, container))

        logger.debug(
            "context %s: %d command(s), %d query(s), %d subscription(s)",
            self.name,
            len(self._commands),
            len(self._queries),
            len(self._event_handlers),
        )

    def _make_endpoint(self, handler: Type[Any] | Callable[..., Any], container: Container) -> Callable[[Any], Any]:
        def endpoint(payload: Any) -> Any:
            h = container.resolve(handler) if isinstance(handler, type) else handler
            return h(payload)
        return endpoint

    def _make_event_endpoint(self, handler: Any, container: Container) -> Callable[[Any], Any]:
        if not isinstance(handler, type):
            return handler
        container.register_class(handler)

        def endpoint(event: Any) -> Any:
            return container.resolve(handler)(event)
        return endpoint
