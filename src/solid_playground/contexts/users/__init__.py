"""Users context (dependency inversion): a service depending on a logger abstraction."""
from .application import CreateUser, UserService
from .domain import Logger
from .infrastructure import ConsoleLogger, FileLogger, default_loggers
from .module import build_users_module

__all__ = [
    "CreateUser",
    "UserService",
    "Logger",
    "ConsoleLogger",
    "FileLogger",
    "default_loggers",
    "build_users_module",
]
