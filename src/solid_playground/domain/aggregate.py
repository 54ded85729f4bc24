from typing import List

from solid_playground.domain.entity import Entity
from solid_playground.domain.events import DomainEvent


class AggregateRoot(Entity):
    """
    Entity that records what happened to it. Command handlers save the
    aggregate first, then drain and publish the recorded events.
    """

    def __init__(self, id: str) -> None:
        super().__init__(id)
        self._recorded: List[DomainEvent] = []

    def raise_event(self, event: DomainEvent) -> None:
        self._recorded.append(event)

    @property
    def has_pending_events(self) -> bool:
        return bool(self._recorded)

    def collect_pending_events(self) -> List[DomainEvent]:
        """Hand over the recorded events; the aggregate keeps none afterwards."""
        events, self._recorded = self._recorded, []
        return events
