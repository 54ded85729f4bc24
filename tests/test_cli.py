"""The solid-playground console command."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from solid_playground.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_log_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SOLID_LOG_FILE", str(tmp_path / "cli.log"))
    monkeypatch.setenv("NO_COLOR", "1")


def test_list() -> None:
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    for name in ("intro", "srp", "ocp", "lsp", "isp", "dip"):
        assert name in result.output


def test_run_srp() -> None:
    result = runner.invoke(app, ["run", "srp"])
    assert result.exit_code == 0, result.output
    assert "Handling the insufficient balance." in result.output
    assert "Withdraw refused: Cannot withdraw 3000: balance is 600.0" in result.output
    assert "Account Statement for BANK123: Balance is 600.0" in result.output


def test_run_all() -> None:
    result = runner.invoke(app, ["run", "all"])
    assert result.exit_code == 0, result.output
    assert "Dependency Inversion Principle" in result.output
    assert "Runtime failure" in result.output


def test_run_unknown_page() -> None:
    result = runner.invoke(app, ["run", "xyz"])
    assert result.exit_code == 1
    assert "Unknown page: xyz" in result.output


def test_discount_default() -> None:
    result = runner.invoke(app, ["discount", "100"])
    assert result.exit_code == 0
    assert result.output.strip() == "25.0"


def test_discount_selected_strategies() -> None:
    result = runner.invoke(app, ["discount", "200", "-s", "loyalty", "-s", "none"])
    assert result.exit_code == 0
    assert result.output.strip() == "30.0"


def test_discount_unknown_strategy() -> None:
    result = runner.invoke(app, ["discount", "100", "-s", "student"])
    assert result.exit_code == 1
    assert "No strategy registered under 'student'" in result.output


def test_opening_balance_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SOLID_OPENING_BALANCE", "5000")
    result = runner.invoke(app, ["run", "srp"])
    assert result.exit_code == 0, result.output
    assert "Balance is 4600.0" in result.output


def test_negative_opening_balance_is_a_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SOLID_OPENING_BALANCE", "-5")
    result = runner.invoke(app, ["run", "srp"])
    assert result.exit_code == 2
    assert "Invalid configuration" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "New balance" not in result.output


def test_discount_negative_amount() -> None:
    result = runner.invoke(app, ["discount", "-50"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "-12.5"


def test_discount_negative_amount_with_strategy() -> None:
    result = runner.invoke(app, ["discount", "-100", "-s", "seasonal"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "-10.0"
