"""Exception hierarchy. Every error here is recoverable by the caller."""
from __future__ import annotations


class PlaygroundError(Exception):
    """Base class for playground errors."""


class LedgerError(PlaygroundError):
    """A ledger operation was refused; the balance is unchanged."""


class InvalidAmount(LedgerError):
    def __init__(self, amount: float) -> None:
        super().__init__(f"Amount must be positive, got {amount}")
        self.amount = amount


class InsufficientFunds(LedgerError):
    def __init__(self, amount: float, balance: float) -> None:
        super().__init__(f"Cannot withdraw {amount}: balance is {balance}")
        self.amount = amount
        self.balance = balance


class AccountNotFound(LedgerError):
    def __init__(self, account_id: str) -> None:
        super().__init__(f"Account {account_id} not found")
        self.account_id = account_id


class AccountAlreadyExists(LedgerError):
    def __init__(self, account_id: str) -> None:
        super().__init__(f"Account {account_id} already exists")
        self.account_id = account_id


class StrategyError(PlaygroundError):
    """Strategy registry misuse."""


class UnknownStrategy(StrategyError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No strategy registered under {self.key!r}"


class DuplicateStrategy(StrategyError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Strategy {key!r} is already registered")
        self.key = key


class EventDeliveryError(PlaygroundError):
    """One or more subscribers failed; every subscriber was still called."""

    def __init__(self, event: object, errors: list[Exception]) -> None:
        super().__init__(f"{len(errors)} handler(s) failed for {type(event).__name__}: {errors[0]}")
        self.event = event
        self.errors = errors


class DeliveryFailed(PlaygroundError):
    """
    The operation was committed but reporting it failed.
    Not a LedgerError: retrying the command would apply it twice.
    """

    def __init__(self, snapshot: object, errors: list[Exception]) -> None:
        super().__init__(f"Operation committed, {len(errors)} notification(s) failed: {errors[0]}")
        self.snapshot = snapshot
        self.errors = errors
