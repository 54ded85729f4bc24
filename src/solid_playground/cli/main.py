"""
CLI for the playground: list pages, run a page, quote a composite discount.
"""
import sys
from typing import List, Optional

import typer

from solid_playground.contexts.pricing import default_discounts
from solid_playground.core import PlaygroundSettings
from solid_playground.errors import UnknownStrategy
from solid_playground.pages import PAGES, run_page
from solid_playground.utils.logger import setup_logger

app = typer.Typer(help="SOLID playground: violating and adhering examples for each principle.")


@app.callback()
def configure(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Log level (default: SOLID_LOG_LEVEL or WARNING)"),
) -> None:
    """Load settings from SOLID_* environment variables and set up logging."""
    try:
        settings = PlaygroundSettings.from_env()
    except ValueError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(2)
    if log_level is not None:
        settings.log_level = log_level.upper()
    setup_logger(level=settings.log_level, force=True)
    ctx.obj = settings


@app.command("list")
def list_pages() -> None:
    """List the available pages."""
    for page in PAGES.values():
        typer.echo(f"{page.name:<6} {page.title}")


@app.command()
def run(
    ctx: typer.Context,
    page: str = typer.Argument(..., help="Page name (see `list`) or `all`"),
) -> None:
    """Run one page, or every page in order."""
    names = list(PAGES) if page == "all" else [page]
    unknown = [name for name in names if name not in PAGES]
    if unknown:
        typer.echo(f"Unknown page: {unknown[0]}. Available: {', '.join(PAGES)}, all", err=True)
        raise typer.Exit(1)
    for name in names:
        typer.echo(f"\n# {PAGES[name].title}")
        run_page(name, sys.stdout, ctx.obj)


@app.command(context_settings={"ignore_unknown_options": True})
def discount(
    amount: float = typer.Argument(..., help="Amount the discounts apply to"),
    strategy: Optional[List[str]] = typer.Option(None, "--strategy", "-s", help="Discount key, repeatable (default: seasonal, loyalty)"),
) -> None:
    """Print the total of the chosen discounts for an amount. Negative amounts pass through unchanged."""
    registry = default_discounts()
    keys = strategy or ["seasonal", "loyalty"]
    try:
        calculator = registry.calculator(*keys)
    except UnknownStrategy as exc:
        typer.echo(f"{exc}. Available: {', '.join(registry.keys())}", err=True)
        raise typer.Exit(1)
    typer.echo(f"{calculator.calculate_total(amount)}")


def main() -> None:
    """Entry point for the solid-playground console command."""
    app()


if __name__ == "__main__":
    main()
