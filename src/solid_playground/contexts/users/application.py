"""Users: the high-level service and its command."""
from __future__ import annotations

from dataclasses import dataclass

from solid_playground.ddd import Command

from .domain import Logger


class UserService:
    """Business logic only; where the log line ends up is the injected logger's concern."""

    def __init__(self, logger: Logger):
        self._logger = logger

    def create_user(self, name: str) -> str:
        if not name.strip():
            raise ValueError("User name must not be blank")
        self._logger.log(f"User {name} Created.")
        return name


@dataclass(frozen=True)
class CreateUser(Command):
    name: str


class CreateUserHandler:
    def __init__(self, user_service: UserService):
        self._service = user_service

    def __call__(self, cmd: CreateUser) -> str:
        return self._service.create_user(cmd.name)
