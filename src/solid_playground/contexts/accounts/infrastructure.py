"""Accounts infrastructure: in-memory repository and console sinks."""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from solid_playground.domain import Repository

from .domain import AccountSnapshot, BankAccount


class IAccountRepository(Repository[BankAccount]):
    pass


class InMemoryAccountRepository(IAccountRepository):
    def __init__(self) -> None:
        self._store: dict[str, BankAccount] = {}

    def get(self, key: str) -> Optional[BankAccount]:
        return self._store.get(key)

    def add(self, aggregate: BankAccount) -> None:
        self._store[aggregate.id] = aggregate

    def save(self, aggregate: BankAccount) -> None:
        self._store[aggregate.id] = aggregate


class _ConsoleSink:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _emit(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout)


class StatementPrinter(_ConsoleSink):
    """Prints account statements. Statement wording changes only here."""

    def report(self, snapshot: AccountSnapshot) -> None:
        self._emit(f"Account Statement for {snapshot.account_id}: Balance is {snapshot.balance}")


class NotificationService(_ConsoleSink):
    """Notifies the account holder. Notification wording changes only here."""

    def report(self, snapshot: AccountSnapshot) -> None:
        self._emit(f"Notifying user of transaction for account {snapshot.account_id}")
