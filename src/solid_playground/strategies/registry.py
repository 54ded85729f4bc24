"""StrategyRegistry — maps stable keys to pluggable behavior implementations."""
from __future__ import annotations

from typing import Generic, Iterable, Iterator, Protocol, TypeVar

from solid_playground.errors import DuplicateStrategy, UnknownStrategy
from solid_playground.strategies.calculator import CompositeCalculator


class Keyed(Protocol):
    key: str


S = TypeVar("S", bound=Keyed)


class StrategyRegistry(Generic[S]):
    """
    Lookup table of strategies by key, in registration order.
    Unknown keys raise UnknownStrategy; there is no fallback value.
    """

    def __init__(self, strategies: Iterable[S] = ()) -> None:
        self._by_key: dict[str, S] = {}
        for strategy in strategies:
            self.register(strategy)

    def register(self, strategy: S) -> S:
        key = strategy.key
        if key in self._by_key:
            raise DuplicateStrategy(key)
        self._by_key[key] = strategy
        return strategy

    def get(self, key: str) -> S:
        try:
            return self._by_key[key]
        except KeyError:
            raise UnknownStrategy(key) from None

    def keys(self) -> list[str]:
        return list(self._by_key)

    def calculator(self, *keys: str) -> CompositeCalculator:
        """Composite of the named strategies, in the order given."""
        return CompositeCalculator(self.get(key) for key in keys)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[S]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)
