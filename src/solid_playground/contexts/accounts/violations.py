"""One class doing three jobs: balance keeping, statement printing, user notification."""
from __future__ import annotations

import sys
from typing import TextIO


class MonolithicBankAccount:
    """
    Any change to statement wording or notification delivery means editing
    the class that guards the balance.
    """

    def __init__(self, account_number: str, balance: float, stream: TextIO | None = None) -> None:
        self.account_number = account_number
        self.balance = balance
        self._stream = stream

    def _say(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout)

    def deposit(self, amount: float) -> None:
        self.balance += amount
        self._say(f"Deposited {amount}. New balance is {self.balance}")

    def withdraw(self, amount: float) -> None:
        if self.balance >= amount:
            self.balance -= amount
            self._say(f"Withdrew {amount}. New balance is {self.balance}")
        else:
            self._say("Handling the insufficient balance.")

    def print_statement(self) -> None:
        self._say(f"Account Statement for {self.account_number}: Balance is {self.balance}")

    def notify_user(self) -> None:
        self._say(f"Notifying user of transaction for account {self.account_number}")
