"""Application layer: commands, queries, handlers."""
from __future__ import annotations

from dataclasses import dataclass

from solid_playground.ddd import Command, Query
from solid_playground.domain import EventBus
from solid_playground.errors import AccountAlreadyExists, AccountNotFound, DeliveryFailed, EventDeliveryError
from solid_playground.utils.logger import get_logger

from .domain import AccountSnapshot, BankAccount, MoneyDeposited, MoneyWithdrawn
from .infrastructure import IAccountRepository, NotificationService

logger = get_logger(__name__)


@dataclass(frozen=True)
class OpenAccount(Command):
    account_id: str
    opening_balance: float = 0.0


@dataclass(frozen=True)
class Deposit(Command):
    account_id: str
    amount: float


@dataclass(frozen=True)
class Withdraw(Command):
    account_id: str
    amount: float


@dataclass(frozen=True)
class GetStatement(Query):
    account_id: str


def _load(repo: IAccountRepository, account_id: str) -> BankAccount:
    account = repo.get(account_id)
    if account is None:
        raise AccountNotFound(account_id)
    return account


def _publish_committed(account: BankAccount, event_bus: EventBus) -> AccountSnapshot:
    """
    Publish the events of an operation that is already saved. Every event is
    delivered even if an earlier one fails; failures surface as DeliveryFailed
    carrying the committed snapshot.
    """
    errors: list[Exception] = []
    for event in account.collect_pending_events():
        try:
            event_bus.publish(event)
        except EventDeliveryError as exc:
            errors.extend(exc.errors)
    snapshot = account.snapshot()
    if errors:
        logger.error("account %s: committed, but %d notification(s) failed", account.id, len(errors))
        raise DeliveryFailed(snapshot, errors) from errors[0]
    return snapshot


class OpenAccountHandler:
    def __init__(self, account_repository: IAccountRepository):
        self._repo = account_repository

    def __call__(self, cmd: OpenAccount) -> str:
        if self._repo.exists(cmd.account_id):
            raise AccountAlreadyExists(cmd.account_id)
        account = BankAccount(id=cmd.account_id, balance=cmd.opening_balance)
        self._repo.add(account)
        return account.id


class DepositHandler:
    def __init__(self, account_repository: IAccountRepository, event_bus: EventBus):
        self._repo = account_repository
        self._event_bus = event_bus

    def __call__(self, cmd: Deposit) -> AccountSnapshot:
        account = _load(self._repo, cmd.account_id)
        account.deposit(cmd.amount)
        self._repo.save(account)
        return _publish_committed(account, self._event_bus)


class WithdrawHandler:
    def __init__(self, account_repository: IAccountRepository, event_bus: EventBus):
        self._repo = account_repository
        self._event_bus = event_bus

    def __call__(self, cmd: Withdraw) -> AccountSnapshot:
        account = _load(self._repo, cmd.account_id)
        account.withdraw(cmd.amount)
        self._repo.save(account)
        return _publish_committed(account, self._event_bus)


class GetStatementHandler:
    def __init__(self, account_repository: IAccountRepository):
        self._repo = account_repository

    def __call__(self, query: GetStatement) -> AccountSnapshot:
        return _load(self._repo, query.account_id).snapshot()


class TransactionNotifier:
    """Event handler: forwards the snapshot of every completed transaction to the notification sink."""

    def __init__(self, notification_service: NotificationService):
        self._sink = notification_service

    def __call__(self, event: MoneyDeposited | MoneyWithdrawn) -> None:
        self._sink.report(event.snapshot)
