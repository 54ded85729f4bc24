"""Accounts bounded context: ledger commands, statement query, transaction notifications."""
from __future__ import annotations

from typing import TextIO

from solid_playground.ddd import DomainModule

from .application import (
    Deposit,
    DepositHandler,
    GetStatement,
    GetStatementHandler,
    OpenAccount,
    OpenAccountHandler,
    TransactionNotifier,
    Withdraw,
    WithdrawHandler,
)
from .domain import MoneyDeposited, MoneyWithdrawn
from .infrastructure import IAccountRepository, InMemoryAccountRepository, NotificationService, StatementPrinter


def build_accounts_module(stream: TextIO | None = None) -> DomainModule:
    return (
        DomainModule("accounts")
        .repository(IAccountRepository, InMemoryAccountRepository)
        .instance(StatementPrinter, StatementPrinter(stream))
        .instance(NotificationService, NotificationService(stream))
        .command(OpenAccount, OpenAccountHandler)
        .command(Deposit, DepositHandler)
        .command(Withdraw, WithdrawHandler)
        .query(GetStatement, GetStatementHandler)
        .on_event(MoneyDeposited, TransactionNotifier)
        .on_event(MoneyWithdrawn, TransactionNotifier)
    )
