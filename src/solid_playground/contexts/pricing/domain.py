"""Pricing domain: the discount strategy contract and the closed set of built-in kinds."""
from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


@runtime_checkable
class Discount(Protocol):
    """Discount strategy: a pure function of the amount, identified by a stable key."""

    key: str

    def apply(self, amount: float) -> float:
        ...


class DiscountKind(str, Enum):
    SEASONAL = "seasonal"
    LOYALTY = "loyalty"
    NONE = "none"
