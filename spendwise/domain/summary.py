"""Pure functions for spending summaries and aggregations.

This module contains the functional core for dashboard figures:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Literal

from spendwise.dates import last_n_days, last_n_months, month_label, same_month
from spendwise.domain.models import (
    ALL_CATEGORIES,
    PRIORITIES,
    Budget,
    CategoryName,
    ClassifiedExpense,
    Money,
    Priority,
)
from spendwise.domain.recommendations import calculate_category_totals, find_budget

SeriesTimeframe = Literal["weekly", "monthly", "yearly"]


@dataclass(frozen=True)
class DashboardStats:
    """Immutable headline figures for a user's spending."""

    total_spent: Money
    monthly_spent: Money
    transaction_count: int
    budget_left: Money | None  # None when no monthly budget is set


@dataclass(frozen=True)
class SeriesPoint:
    """Immutable total for one day or month of a spending series."""

    label: str
    total: Money


def sum_amounts(expenses: Iterable[ClassifiedExpense]) -> Money:
    """Sum the amounts of the given expenses."""
    return Money(sum(expense.amount for expense in expenses))


def compute_dashboard_stats(
    expenses: list[ClassifiedExpense],
    budgets: list[Budget],
    today: date,
) -> DashboardStats:
    """Compute headline spending figures.

    Args:
        expenses: Full expense history.
        budgets: User budgets; the first monthly one sets budget_left.
        today: Reference date selecting the current month.

    Returns:
        DashboardStats with totals and remaining monthly budget.
    """
    monthly_spent = sum_amounts(e for e in expenses if same_month(e.date, today))

    monthly_budget = find_budget(budgets, "monthly")
    budget_left = Money(monthly_budget.amount - monthly_spent) if monthly_budget else None

    return DashboardStats(
        total_spent=sum_amounts(expenses),
        monthly_spent=monthly_spent,
        transaction_count=len(expenses),
        budget_left=budget_left,
    )


def category_totals(expenses: list[ClassifiedExpense]) -> dict[CategoryName, Money]:
    """Sum spending per category, in first-seen order."""
    return calculate_category_totals(expenses)


def priority_totals(expenses: list[ClassifiedExpense]) -> dict[Priority, Money]:
    """Sum spending per priority tier.

    Args:
        expenses: Expenses to aggregate.

    Returns:
        Totals for all four tiers, most important first (zero-filled).
    """
    totals: dict[Priority, Money] = {priority: Money(0) for priority in PRIORITIES}
    for expense in expenses:
        totals[expense.priority] = Money(totals[expense.priority] + expense.amount)
    return totals


def recent_expenses(expenses: list[ClassifiedExpense], limit: int = 20) -> list[ClassifiedExpense]:
    """Return the most recent expenses, newest first.

    Expenses on the same date keep their input order.
    """
    return sorted(expenses, key=lambda e: e.date, reverse=True)[:limit]


def format_budget_label(budget: Budget) -> str:
    """Describe a budget's scope (e.g., "All Categories - Monthly")."""
    scope = "All Categories" if budget.category == ALL_CATEGORIES else budget.category
    return f"{scope} - {budget.timeframe.capitalize()}"


def format_priority_label(priority: str) -> str:
    """Turn a priority label into title case (e.g., "Least Important")."""
    return " ".join(word.capitalize() for word in priority.split("_"))


def spending_series(
    expenses: list[ClassifiedExpense],
    timeframe: SeriesTimeframe,
    today: date,
) -> list[SeriesPoint]:
    """Bucket spending over time, oldest first.

    - weekly: last 7 days, labelled by short weekday name
    - monthly: last 30 days, labelled by day of month
    - yearly: last 12 calendar months, labelled by short month name

    Args:
        expenses: Expenses to bucket.
        timeframe: Series length and granularity.
        today: Last day of the series.

    Returns:
        List of SeriesPoint.

    Raises:
        ValueError: If timeframe is not recognised.
    """
    if timeframe == "yearly":
        by_month: dict[tuple[int, int], float] = {}
        for expense in expenses:
            key = (expense.date.year, expense.date.month)
            by_month[key] = by_month.get(key, 0.0) + expense.amount

        return [
            SeriesPoint(label=month_label(year, month), total=Money(by_month.get((year, month), 0.0)))
            for year, month in last_n_months(today, 12)
        ]

    if timeframe == "weekly":
        days = last_n_days(today, 7)
    elif timeframe == "monthly":
        days = last_n_days(today, 30)
    else:
        raise ValueError(f"Unknown timeframe: {timeframe}")

    by_day: dict[date, float] = {}
    for expense in expenses:
        by_day[expense.date] = by_day.get(expense.date, 0.0) + expense.amount

    points = []
    for day in days:
        label = day.strftime("%a") if timeframe == "weekly" else str(day.day)
        points.append(SeriesPoint(label=label, total=Money(by_day.get(day, 0.0))))
    return points
