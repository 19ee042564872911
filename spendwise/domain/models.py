"""Domain types and records for spendwise.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in the user's currency unit (plain decimal)
- CategoryName: Name of an expense category
- Description: Free-text expense description
"""

from dataclasses import dataclass
from datetime import date
from typing import Literal, NewType

# Amounts are plain decimals; currency symbol and rounding belong to the caller
Money = NewType("Money", float)

CategoryName = NewType("CategoryName", str)

Description = NewType("Description", str)

Priority = Literal["most_important", "important", "less_important", "least_important"]

# Most important first
PRIORITIES: tuple[Priority, ...] = ("most_important", "important", "less_important", "least_important")

Timeframe = Literal["weekly", "monthly"]

TIMEFRAMES: tuple[Timeframe, ...] = ("weekly", "monthly")

Severity = Literal["info", "success", "warning", "danger"]

# Budget category that applies across every expense category
ALL_CATEGORIES = CategoryName("all")


@dataclass(frozen=True)
class ClassifiedExpense:
    """Immutable expense record with its priority already attached."""

    amount: Money
    category: CategoryName
    date: date
    priority: Priority
    description: Description = Description("")


@dataclass(frozen=True)
class Budget:
    """Immutable spending limit for a timeframe."""

    amount: Money
    timeframe: Timeframe
    category: CategoryName = ALL_CATEGORIES


@dataclass(frozen=True)
class Recommendation:
    """Immutable advisory message with an estimated saving."""

    icon: str
    text: str
    savings: Money
    severity: Severity
