"""Pytest fixtures for testing."""

from datetime import date

import pytest

from spendwise.domain.models import (
    Budget,
    CategoryName,
    ClassifiedExpense,
    Description,
    Money,
    Priority,
)

TODAY = date(2025, 3, 15)


def make_expense(
    amount: float,
    category: str = "food",
    priority: Priority = "important",
    day: date = date(2025, 3, 1),
    description: str = "",
) -> ClassifiedExpense:
    """Build an expense with sensible defaults."""
    return ClassifiedExpense(
        amount=Money(amount),
        category=CategoryName(category),
        date=day,
        priority=priority,
        description=Description(description),
    )


@pytest.fixture
def today() -> date:
    """Fixed reference date (Saturday 15 March 2025)."""
    return TODAY


@pytest.fixture
def march_expenses() -> list[ClassifiedExpense]:
    """Five March expenses totalling 7000, dominated by least important food."""
    return [
        make_expense(3000, "food", "least_important", date(2025, 3, 2)),
        make_expense(2000, "food", "least_important", date(2025, 3, 5)),
        make_expense(1000, "rent", "important", date(2025, 3, 1)),
        make_expense(500, "transport", "important", date(2025, 3, 10)),
        make_expense(500, "misc", "important", date(2025, 3, 12)),
    ]


@pytest.fixture
def monthly_budget() -> Budget:
    """Monthly budget of 6000 across all categories."""
    return Budget(amount=Money(6000), timeframe="monthly", category=CategoryName("all"))
