"""Pricing: discount strategy implementations."""
from __future__ import annotations

from solid_playground.strategies import StrategyRegistry

from .domain import Discount, DiscountKind


class PercentageDiscount:
    """Discount of a fixed fraction of the amount."""

    def __init__(self, rate: float, key: str | None = None) -> None:
        if not 0 <= rate <= 1:
            raise ValueError(f"Discount rate must be within [0, 1], got {rate}")
        self.rate = rate
        self.key = key or f"percent_{rate:g}"

    def apply(self, amount: float) -> float:
        return amount * self.rate

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, rate={self.rate})"


class SeasonalDiscount(PercentageDiscount):
    def __init__(self) -> None:
        super().__init__(0.10, key=DiscountKind.SEASONAL.value)


class LoyaltyDiscount(PercentageDiscount):
    def __init__(self) -> None:
        super().__init__(0.15, key=DiscountKind.LOYALTY.value)


class NoDiscount:
    key = DiscountKind.NONE.value

    def apply(self, amount: float) -> float:
        return 0.0


_BY_KIND: dict[DiscountKind, type] = {
    DiscountKind.SEASONAL: SeasonalDiscount,
    DiscountKind.LOYALTY: LoyaltyDiscount,
    DiscountKind.NONE: NoDiscount,
}

_missing = set(DiscountKind) - set(_BY_KIND)
if _missing:
    raise TypeError(f"DiscountKind members without a strategy: {sorted(k.value for k in _missing)}")


def discount_for(kind: DiscountKind) -> Discount:
    """Strategy for a built-in kind. Every kind has one; there is no fallback."""
    return _BY_KIND[DiscountKind(kind)]()


def default_discounts() -> StrategyRegistry[Discount]:
    """Registry with one instance of every built-in kind, in declaration order."""
    return StrategyRegistry(discount_for(kind) for kind in DiscountKind)
