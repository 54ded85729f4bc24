"""Domain layer base classes: Entity, ValueObject, AggregateRoot, DomainEvent, Repository."""
from solid_playground.domain.entity import Entity
from solid_playground.domain.value_object import ValueObject
from solid_playground.domain.aggregate import AggregateRoot
from solid_playground.domain.events import DomainEvent, EventBus, InProcessEventDispatcher
from solid_playground.domain.repository import Repository

__all__ = [
    "Entity",
    "ValueObject",
    "AggregateRoot",
    "DomainEvent",
    "EventBus",
    "InProcessEventDispatcher",
    "Repository",
]
