"""Pricing bounded context: discount registry bound as an instance, quote query."""
from solid_playground.ddd import DomainModule
from solid_playground.strategies import StrategyRegistry

from .application import QuoteDiscount, QuoteDiscountHandler
from .infrastructure import default_discounts


def build_pricing_module(registry: StrategyRegistry | None = None) -> DomainModule:
    return (
        DomainModule("pricing")
        .instance(StrategyRegistry, registry if registry is not None else default_discounts())
        .query(QuoteDiscount, QuoteDiscountHandler)
    )
