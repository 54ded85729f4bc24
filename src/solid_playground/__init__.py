"""
solid_playground — SOLID principles shown through paired violating and adhering examples.
The structured core: strategy registry, composite calculator, account ledger, reporting sinks.
"""
from solid_playground.core import Config, Container, Module, Playground, PlaygroundSettings
from solid_playground.errors import (
    InsufficientFunds,
    InvalidAmount,
    LedgerError,
    PlaygroundError,
    UnknownStrategy,
)
from solid_playground.strategies import CompositeCalculator, StrategyRegistry

__all__ = [
    "Config",
    "Container",
    "Module",
    "Playground",
    "PlaygroundSettings",
    "InsufficientFunds",
    "InvalidAmount",
    "LedgerError",
    "PlaygroundError",
    "UnknownStrategy",
    "CompositeCalculator",
    "StrategyRegistry",
]
