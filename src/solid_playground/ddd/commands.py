"""Payload markers. Playground.send dispatches a Command to one handler, Playground.ask a Query."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Changes state; its handler may raise a LedgerError."""


@dataclass(frozen=True)
class Query:
    """Reads state only."""
