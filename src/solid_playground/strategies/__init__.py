"""Pluggable strategies: the registry and the composite calculator."""
from solid_playground.strategies.calculator import AmountStrategy, CompositeCalculator
from solid_playground.strategies.registry import StrategyRegistry

__all__ = ["AmountStrategy", "CompositeCalculator", "StrategyRegistry"]
