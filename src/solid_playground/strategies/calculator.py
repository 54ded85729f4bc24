"""CompositeCalculator — applies an ordered, fixed sequence of strategies to one amount."""
from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class AmountStrategy(Protocol):
    """A strategy identified by a stable key that maps an amount to a number."""

    key: str

    def apply(self, amount: float) -> float:
        ...


class CompositeCalculator:
    """
    Sums the results of its strategies in insertion order.

    The sequence is fixed at construction; build a new calculator to change it.
    Amounts are passed to every strategy unchanged, negative ones included.
    """

    def __init__(self, strategies: Iterable[AmountStrategy] = ()) -> None:
        self._strategies: tuple[AmountStrategy, ...] = tuple(strategies)

    @property
    def strategies(self) -> tuple[AmountStrategy, ...]:
        return self._strategies

    def calculate_total(self, amount: float) -> float:
        total = 0.0
        for strategy in self._strategies:
            total += strategy.apply(amount)
        return total

    def __len__(self) -> int:
        return len(self._strategies)

    def __repr__(self) -> str:
        keys = ", ".join(s.key for s in self._strategies)
        return f"CompositeCalculator([{keys}])"
