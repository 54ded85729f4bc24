"""One fat worker interface that every implementation must satisfy in full."""
from abc import ABC, abstractmethod


class Worker(ABC):
    @abstractmethod
    def eat(self) -> str:
        ...

    @abstractmethod
    def work(self) -> str:
        ...


class HumanWorker(Worker):
    def eat(self) -> str:
        return "Human is eating..."

    def work(self) -> str:
        return "Human is working..."


class RobotWorker(Worker):
    def eat(self) -> str:
        raise NotImplementedError("Robot can't eat")

    def work(self) -> str:
        return "Robot is working..."
