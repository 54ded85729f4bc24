"""Logging strategies injected into the user service."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from solid_playground import Playground
from solid_playground.contexts.users import (
    ConsoleLogger,
    CreateUser,
    FileLogger,
    Logger,
    UserService,
    build_users_module,
    default_loggers,
)
from solid_playground.contexts.users.violations import HardwiredUserService


class RecordingLogger:
    key = "memory"

    def __init__(self) -> None:
        self.messages: list[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)


def test_service_accepts_any_logger() -> None:
    recorder = RecordingLogger()
    assert isinstance(recorder, Logger)
    assert UserService(recorder).create_user("Vinay") == "Vinay"
    assert recorder.messages == ["User Vinay Created."]


def test_blank_name_rejected() -> None:
    recorder = RecordingLogger()
    with pytest.raises(ValueError):
        UserService(recorder).create_user("  ")
    assert recorder.messages == []


def test_console_logger_writes_stream() -> None:
    out = io.StringIO()
    ConsoleLogger(out).log("hi")
    assert out.getvalue() == "Logging message to console: hi\n"


def test_file_logger_appends(tmp_path: Path) -> None:
    path = tmp_path / "users.log"
    logger = FileLogger(path)
    logger.log("one")
    logger.log("two")
    assert path.read_text(encoding="utf-8").splitlines() == [
        "Logging message to file: one",
        "Logging message to file: two",
    ]


def test_file_logger_propagates_io_errors(tmp_path: Path) -> None:
    logger = FileLogger(tmp_path / "missing-dir" / "users.log")
    with pytest.raises(OSError):
        UserService(logger).create_user("Vinay")


def test_default_loggers_registry(tmp_path: Path) -> None:
    registry = default_loggers(tmp_path / "x.log", stream=io.StringIO())
    assert registry.keys() == ["console", "file"]


def test_hardwired_service_always_writes_file(tmp_path: Path) -> None:
    path = tmp_path / "hardwired.log"
    HardwiredUserService(path).create_user("Vinay")
    assert "User Vinay Created." in path.read_text(encoding="utf-8")


def test_users_module_wires_logger() -> None:
    recorder = RecordingLogger()
    app = Playground().register(build_users_module(recorder))
    assert app.send(CreateUser("Ann")) == "Ann"
    assert recorder.messages == ["User Ann Created."]
