"""Accounts domain: the ledger aggregate, its snapshot and events."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from solid_playground.domain import AggregateRoot, DomainEvent, ValueObject
from solid_playground.errors import InsufficientFunds, InvalidAmount
from solid_playground.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AccountSnapshot(ValueObject):
    """Read-only view of an account handed to reporting sinks."""
    account_id: str
    balance: float


@dataclass(frozen=True)
class MoneyDeposited(DomainEvent):
    amount: float
    snapshot: AccountSnapshot


@dataclass(frozen=True)
class MoneyWithdrawn(DomainEvent):
    amount: float
    snapshot: AccountSnapshot


class ReportingSink(Protocol):
    """Anything that can emit a line about an account snapshot."""

    def report(self, snapshot: AccountSnapshot) -> None:
        ...


def _require_positive(amount: float) -> None:
    # NaN fails this comparison too
    if not amount > 0:
        raise InvalidAmount(amount)


class BankAccount(AggregateRoot):
    """
    Ledger: an account id and a non-negative balance.
    The balance only changes through deposit() and withdraw(); a refused
    operation raises and leaves it untouched.
    """

    def __init__(self, id: str, balance: float = 0.0) -> None:
        if not balance >= 0:
            raise InvalidAmount(balance)
        super().__init__(id)
        self._balance = float(balance)

    @property
    def balance(self) -> float:
        return self._balance

    def deposit(self, amount: float) -> None:
        _require_positive(amount)
        self._balance += amount
        logger.debug("account %s: deposited %s, balance %s", self.id, amount, self._balance)
        self.raise_event(MoneyDeposited(amount=amount, snapshot=self.snapshot()))

    def withdraw(self, amount: float) -> None:
        _require_positive(amount)
        if amount > self._balance:
            logger.warning("account %s: refused withdrawal of %s, balance %s", self.id, amount, self._balance)
            raise InsufficientFunds(amount, self._balance)
        self._balance -= amount
        logger.debug("account %s: withdrew %s, balance %s", self.id, amount, self._balance)
        self.raise_event(MoneyWithdrawn(amount=amount, snapshot=self.snapshot()))

    def snapshot(self) -> AccountSnapshot:
        return AccountSnapshot(account_id=self.id, balance=self._balance)

    def __repr__(self) -> str:
        return f"BankAccount(id={self.id!r}, balance={self._balance})"
