"""Recommend and summary commands for viewing spending insights."""

import sys
from datetime import date, datetime
from pathlib import Path
from typing import cast

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from spendwise.config import get_ledger_path, get_setting
from spendwise.domain.models import Budget, ClassifiedExpense
from spendwise.domain.recommendations import format_money, generate_recommendations
from spendwise.domain.summary import (
    SeriesTimeframe,
    category_totals,
    compute_dashboard_stats,
    format_budget_label,
    format_priority_label,
    priority_totals,
    recent_expenses,
    spending_series,
)
from spendwise.ledger import Ledger, LedgerError, load_expenses_csv, load_ledger

console = Console()

SEVERITY_STYLES = {
    "info": "cyan",
    "success": "green",
    "warning": "yellow",
    "danger": "red",
}

SERIES_TIMEFRAMES = ("weekly", "monthly", "yearly")


def parse_reference_date(today: str | None) -> date:
    """Parse the --today option, defaulting to the current date.

    Args:
        today: Date in YYYY-MM-DD format, or None.

    Returns:
        Reference date.
    """
    if today is None:
        return date.today()

    try:
        return datetime.strptime(today, "%Y-%m-%d").date()
    except ValueError:
        console.print(f"[red]Invalid date: {escape(today)} (expected YYYY-MM-DD)[/red]", style="bold")
        sys.exit(1)


def load_records(ledger_path: str | None, csv_path: str | None) -> tuple[list[ClassifiedExpense], list[Budget]]:
    """Load expenses and budgets from the ledger and optional CSV export.

    Args:
        ledger_path: JSON ledger path, or None for the configured one.
        csv_path: Optional CSV of extra expenses.

    Returns:
        Tuple of (expenses, budgets).
    """
    try:
        if csv_path and not ledger_path:
            ledger = Ledger(expenses=load_expenses_csv(Path(csv_path).expanduser()))
        else:
            path = Path(ledger_path).expanduser() if ledger_path else get_ledger_path()
            ledger = load_ledger(path)
            if csv_path:
                ledger.expenses.extend(load_expenses_csv(Path(csv_path).expanduser()))
    except LedgerError as e:
        console.print(f"[red]Ledger error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    return ledger.expenses, ledger.budgets


def recommend_command(
    ledger_path: str | None = None,
    csv_path: str | None = None,
    today: str | None = None,
) -> None:
    """Show savings recommendations for the current month."""
    reference = parse_reference_date(today)
    expenses, budgets = load_records(ledger_path, csv_path)
    currency = str(get_setting("currency"))

    recommendations = generate_recommendations(expenses, budgets, reference, currency)

    console.print(f"[bold cyan]Recommendations for {reference.strftime('%B %Y')}[/bold cyan]\n")

    for idx, rec in enumerate(recommendations, 1):
        style = SEVERITY_STYLES[rec.severity]
        console.print(f"{idx}. {rec.icon} [{style}]{escape(rec.text)}[/{style}]")
        if rec.savings > 0:
            console.print(f"   [green]Potential savings: {format_money(rec.savings, currency)}[/green]")
        console.print()


RECENT_EXPENSES_LIMIT = 20


def render_recent_expenses(expenses: list[ClassifiedExpense], currency: str) -> None:
    """Render the latest expenses, newest first."""
    table = Table(title="Recent expenses")
    table.add_column("Date", style="cyan")
    table.add_column("Description")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right")
    table.add_column("Priority")

    for expense in recent_expenses(expenses, RECENT_EXPENSES_LIMIT):
        table.add_row(
            expense.date.isoformat(),
            escape(expense.description or expense.category or "-"),
            escape(expense.category or "-"),
            format_money(expense.amount, currency),
            format_priority_label(expense.priority),
        )

    console.print(table)


def render_budgets(budgets: list[Budget], currency: str) -> None:
    """Render the budget list, or a hint when there is none."""
    if not budgets:
        console.print("[dim]No budgets set. Create your first budget![/dim]")
        return

    table = Table(title="Budgets")
    table.add_column("Budget", style="magenta")
    table.add_column("Amount", justify="right")
    for budget in budgets:
        table.add_row(escape(format_budget_label(budget)), format_money(budget.amount, currency))
    console.print(table)


def summary_command(
    ledger_path: str | None = None,
    csv_path: str | None = None,
    timeframe: str = "monthly",
    today: str | None = None,
) -> None:
    """Show spending statistics and breakdowns."""
    if timeframe not in SERIES_TIMEFRAMES:
        console.print(f"[red]Invalid timeframe: {escape(timeframe)} (use weekly, monthly or yearly)[/red]")
        sys.exit(1)

    reference = parse_reference_date(today)
    expenses, budgets = load_records(ledger_path, csv_path)
    currency = str(get_setting("currency"))

    if not expenses:
        console.print("[dim]No expenses yet. Start tracking![/dim]")
        render_budgets(budgets, currency)
        return

    stats = compute_dashboard_stats(expenses, budgets, reference)

    console.print(f"[bold]Total spent:[/bold] {format_money(stats.total_spent, currency)}")
    console.print(f"[bold]This month:[/bold] {format_money(stats.monthly_spent, currency)}")
    console.print(f"[bold]Transactions:[/bold] {stats.transaction_count}")
    if stats.budget_left is None:
        console.print("[bold]Budget left:[/bold] [dim]No Budget Set[/dim]")
    elif stats.budget_left < 0:
        console.print(f"[bold]Budget left:[/bold] [red]{format_money(stats.budget_left, currency)}[/red]")
    else:
        console.print(f"[bold]Budget left:[/bold] [green]{format_money(stats.budget_left, currency)}[/green]")
    console.print()

    category_table = Table(title="Spending by category")
    category_table.add_column("Category", style="magenta")
    category_table.add_column("Amount", justify="right")
    for category, amount in category_totals(expenses).items():
        category_table.add_row(escape(category or "-"), format_money(amount, currency))
    console.print(category_table)

    priority_table = Table(title="Spending by priority")
    priority_table.add_column("Priority", style="cyan")
    priority_table.add_column("Amount", justify="right")
    for priority, amount in priority_totals(expenses).items():
        priority_table.add_row(format_priority_label(priority), format_money(amount, currency))
    console.print(priority_table)

    render_recent_expenses(expenses, currency)
    render_budgets(budgets, currency)

    series = spending_series(expenses, cast(SeriesTimeframe, timeframe), reference)
    max_total = max(point.total for point in series)
    bar_width = 30

    console.print(f"\n[bold cyan]Spending ({timeframe})[/bold cyan]\n")
    for point in series:
        bar_length = int(point.total / max_total * bar_width) if max_total > 0 else 0
        console.print(f"  {point.label:>4} {format_money(point.total, currency):>14} {'█' * bar_length}")
