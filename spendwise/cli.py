"""CLI entry point for spendwise."""

import sys
import tomllib

import typer
from rich.console import Console
from rich.markup import escape

from spendwise.commands.admin import init_command
from spendwise.commands.classify import classify_command
from spendwise.commands.insights import recommend_command, summary_command
from spendwise.config import DEFAULT_SETTINGS, get_setting
from spendwise.logging_config import setup_logging

console = Console()

app = typer.Typer(
    name="spendwise",
    help="Spendwise - expense priority classification and savings recommendations",
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(None, "--log-level", help="Log level (default: from config)"),
) -> None:
    """Spendwise - expense priority classification and savings recommendations."""
    try:
        configured_level = str(get_setting("log_level"))
    except tomllib.TOMLDecodeError as e:
        # init --force must still be able to replace a broken config
        if ctx.invoked_subcommand != "init":
            console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
            console.print("[yellow]Fix the file or run 'spendwise init --force'[/yellow]")
            sys.exit(1)
        configured_level = str(DEFAULT_SETTINGS["log_level"])

    setup_logging(log_level or configured_level)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize spendwise configuration."""
    init_command(force)


@app.command()
def classify(
    amount: str,
    category: str,
    description: str = typer.Argument("", help="Free-text description of the expense"),
    explain: bool = typer.Option(False, "--explain", "-e", help="Show score and matched features"),
) -> None:
    """Classify an expense by priority."""
    classify_command(amount, category, description, explain)


@app.command()
def recommend(
    ledger: str = typer.Option(None, "--ledger", "-l", help="JSON ledger export (default: from config)"),
    csv: str = typer.Option(None, "--csv", help="CSV file of expenses"),
    today: str = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
) -> None:
    """Show your savings recommendations for the month."""
    recommend_command(ledger, csv, today)


@app.command()
def summary(
    ledger: str = typer.Option(None, "--ledger", "-l", help="JSON ledger export (default: from config)"),
    csv: str = typer.Option(None, "--csv", help="CSV file of expenses"),
    timeframe: str = typer.Option("monthly", "--timeframe", "-t", help="Series: 'weekly', 'monthly' or 'yearly'"),
    today: str = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
) -> None:
    """Show your spending statistics and breakdowns."""
    summary_command(ledger, csv, timeframe, today)


if __name__ == "__main__":
    app()
