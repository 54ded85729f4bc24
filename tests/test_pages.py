"""Page narratives render both halves without raising."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from solid_playground.core import PlaygroundSettings
from solid_playground.pages import PAGES, run_page


@pytest.fixture
def settings(tmp_path: Path) -> PlaygroundSettings:
    return PlaygroundSettings(log_file=tmp_path / "pages.log")


@pytest.mark.parametrize("name", list(PAGES))
def test_page_runs(name: str, settings: PlaygroundSettings) -> None:
    out = io.StringIO()
    run_page(name, out, settings)
    assert out.getvalue()


def test_ocp_page_totals(settings: PlaygroundSettings) -> None:
    out = io.StringIO()
    run_page("ocp", out, settings)
    text = out.getvalue()
    assert "student   discount on 100: 0.0" in text
    assert "CompositeCalculator([seasonal, loyalty]) on 100: 25.0" in text
    assert "Quoted loyalty discount on 200: 30.0" in text


def test_dip_page_writes_log_file(settings: PlaygroundSettings) -> None:
    out = io.StringIO()
    run_page("dip", out, settings)
    logged = settings.log_file.read_text(encoding="utf-8")
    assert "User Vinay Kumar Created." in logged
    assert "User Vinay Kumar DIP file logger Created." in logged
    assert "Logging message to console: User Vinay Kumar DIP console logger Created." in out.getvalue()


def test_intro_lists_principles(settings: PlaygroundSettings) -> None:
    out = io.StringIO()
    run_page("intro", out, settings)
    assert "SRP  Single Responsibility Principle" in out.getvalue()


def test_unknown_page() -> None:
    with pytest.raises(KeyError):
        run_page("nope", io.StringIO())


def test_srp_page_follows_bank_scenario(settings: PlaygroundSettings) -> None:
    out = io.StringIO()
    run_page("srp", out, settings)
    text = out.getvalue()
    assert "Deposit 100. New balance is 1100.0" in text
    assert "Withdraw 500. New balance is 600.0" in text
    assert "Account Statement for BANK123: Balance is 600.0" in text


def test_srp_page_reports_refused_opening(tmp_path: Path) -> None:
    out = io.StringIO()
    run_page("srp", out, PlaygroundSettings(log_file=tmp_path / "p.log", opening_balance=-5))
    assert "OpenAccount refused: Amount must be positive, got -5" in out.getvalue()


def test_lsp_and_isp_pages_show_every_step(settings: PlaygroundSettings) -> None:
    out = io.StringIO()
    run_page("lsp", out, settings)
    run_page("isp", out, settings)
    text = out.getvalue()
    assert "Adhering to LSP: class separation" in text
    assert "Ann is working...\nAnn is eating..." in text
