"""Users bounded context: the logger strategy is chosen by whoever builds the module."""
from solid_playground.ddd import DomainModule

from .application import CreateUser, CreateUserHandler, UserService
from .domain import Logger


def build_users_module(logger: Logger) -> DomainModule:
    return (
        DomainModule("users")
        .instance(Logger, logger)
        .bind(UserService, UserService)
        .command(CreateUser, CreateUserHandler)
    )
