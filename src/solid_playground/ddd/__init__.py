from solid_playground.ddd.commands import Command, Query
from solid_playground.ddd.domain_module import DomainModule

__all__ = ["Command", "Query", "DomainModule"]
