"""setup_logger attaches exactly one managed handler."""

from __future__ import annotations

import io
import logging

import pytest

from solid_playground.utils.logger import ColoredFormatter, PlaygroundHandler, get_logger, setup_logger


def _managed() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if isinstance(h, PlaygroundHandler)]


def test_setup_is_idempotent() -> None:
    setup_logger(level="INFO", use_color=False, stream=io.StringIO())
    setup_logger(level="DEBUG", use_color=False, stream=io.StringIO())
    assert len(_managed()) == 1
    assert logging.getLogger().level == logging.INFO


def test_force_replaces_handler() -> None:
    setup_logger(level="INFO", use_color=False, stream=io.StringIO())
    stream = io.StringIO()
    setup_logger(level="DEBUG", use_color=False, stream=stream, force=True)
    assert len(_managed()) == 1
    get_logger("solid_playground.test").debug("hello")
    assert "DEBUG [solid_playground.test] hello" in stream.getvalue()


def test_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SOLID_LOG_LEVEL", "error")
    setup_logger(use_color=False, stream=io.StringIO(), force=True)
    assert logging.getLogger().level == logging.ERROR


def test_unknown_level_falls_back_to_warning() -> None:
    setup_logger(level="chatty", use_color=False, stream=io.StringIO(), force=True)
    assert logging.getLogger().level == logging.WARNING


def test_no_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    setup_logger(stream=io.StringIO(), force=True)
    assert not isinstance(_managed()[0].formatter, ColoredFormatter)


def test_colored_formatter_restores_record() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "msg", None, None)
    output = ColoredFormatter("%(levelname)s %(name)s %(message)s").format(record)
    assert "\033[" in output
    assert record.levelname == "WARNING"
    assert record.name == "x"


def test_ledger_refusal_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    from solid_playground.contexts.accounts import BankAccount
    from solid_playground.errors import InsufficientFunds

    with caplog.at_level(logging.WARNING, logger="solid_playground"):
        with pytest.raises(InsufficientFunds):
            BankAccount("A", 1).withdraw(2)
    assert "refused withdrawal" in caplog.text
