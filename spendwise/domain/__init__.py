"""Domain models and types for spendwise.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from the command line shell
"""

from spendwise.domain.models import (
    PRIORITIES,
    Budget,
    CategoryName,
    ClassifiedExpense,
    Description,
    Money,
    Priority,
    Recommendation,
)

__all__ = [
    "Money",
    "CategoryName",
    "Description",
    "Priority",
    "PRIORITIES",
    "ClassifiedExpense",
    "Budget",
    "Recommendation",
]
