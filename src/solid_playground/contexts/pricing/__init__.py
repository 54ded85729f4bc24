"""Pricing context (open/closed): discount strategies composed by a calculator."""
from .domain import Discount, DiscountKind
from .infrastructure import (
    LoyaltyDiscount,
    NoDiscount,
    PercentageDiscount,
    SeasonalDiscount,
    default_discounts,
    discount_for,
)
from .module import build_pricing_module

__all__ = [
    "Discount",
    "DiscountKind",
    "LoyaltyDiscount",
    "NoDiscount",
    "PercentageDiscount",
    "SeasonalDiscount",
    "default_discounts",
    "discount_for",
    "build_pricing_module",
]
