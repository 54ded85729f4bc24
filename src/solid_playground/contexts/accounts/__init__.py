"""Accounts context (single responsibility): ledger, statement printer, notifications."""
from .domain import AccountSnapshot, BankAccount, MoneyDeposited, MoneyWithdrawn, ReportingSink
from .infrastructure import InMemoryAccountRepository, NotificationService, StatementPrinter
from .module import build_accounts_module

__all__ = [
    "AccountSnapshot",
    "BankAccount",
    "MoneyDeposited",
    "MoneyWithdrawn",
    "ReportingSink",
    "InMemoryAccountRepository",
    "NotificationService",
    "StatementPrinter",
    "build_accounts_module",
]
