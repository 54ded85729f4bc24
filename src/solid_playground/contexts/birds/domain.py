"""Birds expressed as capabilities: a bird only offers what it can actually do."""
from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class Eater(Protocol):
    def eat(self) -> str:
        ...


@runtime_checkable
class Flyer(Protocol):
    def fly(self) -> str:
        ...


class Bird:
    """Every bird eats; flying is a separate capability."""

    def eat(self) -> str:
        return f"{type(self).__name__} is eating..."


class FlyingBird(Bird):
    """Class separation: only birds that fly sit under this branch."""

    def fly(self) -> str:
        return f"{type(self).__name__} is flying..."


class Duck(FlyingBird):
    pass


class Sparrow(FlyingBird):
    pass


class Ostrich(Bird):
    def run(self) -> str:
        return "Ostrich is running..."


def fly_flying_bird(bird: FlyingBird) -> str:
    """Hierarchy version: the parameter type already excludes Ostrich."""
    return bird.fly()


def let_fly(flyer: Flyer) -> str:
    """Protocol version: any flyer, related to Bird or not; an Ostrich is a type error."""
    return flyer.fly()


def flyers(birds: Iterable[object]) -> list[Flyer]:
    return [bird for bird in birds if isinstance(bird, Flyer)]
