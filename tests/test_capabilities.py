"""Capability-scoped birds and workers versus their naive hierarchies."""

from __future__ import annotations

import pytest

from solid_playground.contexts.birds import (
    Bird,
    Duck,
    Eater,
    Flyer,
    FlyingBird,
    Ostrich,
    Sparrow,
    fly_flying_bird,
    flyers,
    let_fly,
)
from solid_playground.contexts.birds import violations as naive_birds
from solid_playground.contexts.workers import (
    Eatable,
    HumanWorker,
    RobotWorker,
    Workable,
    Worker,
    full_day,
    lunch_break,
    start_shift,
)
from solid_playground.contexts.workers import violations as naive_workers


def test_naive_ostrich_breaks_substitution() -> None:
    assert naive_birds.fly_bird(naive_birds.Duck()) == "Duck is flying..."
    with pytest.raises(NotImplementedError):
        naive_birds.fly_bird(naive_birds.Ostrich())


def test_only_flyers_fly() -> None:
    birds = [Bird(), Duck(), Sparrow(), Ostrich()]
    assert [type(b).__name__ for b in flyers(birds)] == ["Duck", "Sparrow"]
    assert [let_fly(f) for f in flyers(birds)] == ["Duck is flying...", "Sparrow is flying..."]


def test_every_bird_eats() -> None:
    for bird in (Bird(), Duck(), Ostrich()):
        assert isinstance(bird, Eater)
    assert Ostrich().eat() == "Ostrich is eating..."
    assert not isinstance(Ostrich(), Flyer)
    assert not hasattr(Ostrich(), "fly")


def test_naive_robot_cannot_eat() -> None:
    robot = naive_workers.RobotWorker()
    assert robot.work() == "Robot is working..."
    with pytest.raises(NotImplementedError):
        robot.eat()


def test_workers_expose_only_their_capabilities() -> None:
    human, robot = HumanWorker("Ann"), RobotWorker()
    assert isinstance(human, Workable) and isinstance(human, Eatable)
    assert isinstance(robot, Workable)
    assert not isinstance(robot, Eatable)
    assert start_shift([human, robot]) == ["Ann is working...", "Robot is working..."]
    assert lunch_break([human]) == ["Ann is eating..."]


def test_flying_bird_branch() -> None:
    assert fly_flying_bird(Duck()) == "Duck is flying..."
    assert isinstance(Sparrow(), FlyingBird)
    assert not isinstance(Ostrich(), FlyingBird)


def test_combined_worker_role() -> None:
    assert isinstance(HumanWorker(), Worker)
    assert not isinstance(RobotWorker(), Worker)
    assert full_day([HumanWorker("Ann")]) == ["Ann is working...", "Ann is eating..."]
