"""Playground — composed from modules via app.register(module)."""
from __future__ import annotations

from typing import Any, Callable

from solid_playground.core.container import Container
from solid_playground.core.module import Module
from solid_playground.utils.logger import get_logger

logger = get_logger(__name__)

Endpoint = Callable[[Any], Any]


class Playground:
    """
    Application. Composed from modules via register(module).
    Commands and queries are dispatched in-process by payload type.
    """

    def __init__(self, config: Any = None) -> None:
        self._modules: list[Module] = []
        self._container = Container()
        self._commands: dict[type, Endpoint] = {}
        self._queries: dict[type, Endpoint] = {}
        self._container.register_instance(Playground, self)
        if config is not None:
            self._container.register_instance(type(config), config)
            self._container.register_instance("config", config)

    def register(self, module: Module) -> Playground:
        """Register a module (DomainModule, EventBusModule, etc.). Returns self for chaining."""
        module.register_into(self)
        self._modules.append(module)
        logger.debug("module registered: %s", getattr(module, "name", type(module).__name__))
        return self

    def add_command(self, cmd_type: type, endpoint: Endpoint) -> None:
        """Attach the endpoint that executes commands of cmd_type. One endpoint per type."""
        if cmd_type in self._commands:
            raise ValueError(f"Command {cmd_type.__name__} already has a handler")
        self._commands[cmd_type] = endpoint

    def add_query(self, query_type: type, endpoint: Endpoint) -> None:
        """Attach the endpoint that answers queries of query_type. One endpoint per type."""
        if query_type in self._queries:
            raise ValueError(f"Query {query_type.__name__} already has a handler")
        self._queries[query_type] = endpoint

    def send(self, command: Any) -> Any:
        """Execute a command and return the handler's result."""
        endpoint = self._commands.get(type(command))
        if endpoint is None:
            raise LookupError(f"No handler for command {type(command).__name__}")
        return endpoint(command)

    def ask(self, query: Any) -> Any:
        """Answer a query and return the handler's result."""
        endpoint = self._queries.get(type(query))
        if endpoint is None:
            raise LookupError(f"No handler for query {type(query).__name__}")
        return endpoint(query)

    @property
    def modules(self) -> list[Module]:
        return list(self._modules)

    @property
    def container(self) -> Container:
        """DI container: registration and resolution of dependencies."""
        return self._container
