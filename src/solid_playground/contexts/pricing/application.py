"""Pricing: queries and handlers (DI of the discount registry)."""
from __future__ import annotations

from dataclasses import dataclass

from solid_playground.ddd import Query
from solid_playground.strategies import StrategyRegistry


@dataclass(frozen=True)
class QuoteDiscount(Query):
    amount: float
    discount_keys: tuple[str, ...] = ("seasonal", "loyalty")


class QuoteDiscountHandler:
    def __init__(self, discount_registry: StrategyRegistry):
        self._registry = discount_registry

    def __call__(self, query: QuoteDiscount) -> float:
        return self._registry.calculator(*query.discount_keys).calculate_total(query.amount)
