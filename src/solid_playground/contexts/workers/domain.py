"""Worker roles split into small interfaces."""
from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class Workable(Protocol):
    def work(self) -> str:
        ...


@runtime_checkable
class Eatable(Protocol):
    def eat(self) -> str:
        ...


@runtime_checkable
class Worker(Workable, Eatable, Protocol):
    """A role that both works and eats; robots never claim it."""


class HumanWorker:
    def __init__(self, name: str = "Human") -> None:
        self.name = name

    def work(self) -> str:
        return f"{self.name} is working..."

    def eat(self) -> str:
        return f"{self.name} is eating..."


class RobotWorker:
    def __init__(self, name: str = "Robot") -> None:
        self.name = name

    def work(self) -> str:
        return f"{self.name} is working..."


def start_shift(workers: Iterable[Workable]) -> list[str]:
    return [worker.work() for worker in workers]


def lunch_break(eaters: Iterable[Eatable]) -> list[str]:
    return [eater.eat() for eater in eaters]


def full_day(workers: Iterable[Worker]) -> list[str]:
    return [line for worker in workers for line in (worker.work(), worker.eat())]
