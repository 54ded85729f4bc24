"""Storage contract for aggregates. The playground only ships in-memory implementations."""
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

AggregateT = TypeVar("AggregateT")


class Repository(ABC, Generic[AggregateT]):
    @abstractmethod
    def get(self, key: str) -> Optional[AggregateT]:
        """None when nothing is stored under key."""

    @abstractmethod
    def add(self, aggregate: AggregateT) -> None:
        ...

    @abstractmethod
    def save(self, aggregate: AggregateT) -> None:
        ...

    def exists(self, key: str) -> bool:
        return self.get(key) is not None
