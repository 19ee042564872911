"""Pure functions for turning exported records into domain objects.

This module contains the functional core for record parsing:
- No I/O operations (files are read by spendwise.ledger)
- No side effects
- Pure data transformations
- Easy to test

Rows that cannot be used are skipped (None is returned) rather than failing
the whole import.
"""

import logging
import math
import re
from datetime import date, datetime
from typing import Any

import pandas as pd

from spendwise.domain.classifier import classify_expense, parse_amount
from spendwise.domain.models import (
    ALL_CATEGORIES,
    PRIORITIES,
    TIMEFRAMES,
    Budget,
    CategoryName,
    ClassifiedExpense,
    Description,
    Money,
)

logger = logging.getLogger(__name__)

# e.g. "2025/03/05" or "2025.03.05"
YEAR_FIRST_PATTERN = re.compile(r"^\d{4}\D")


def normalize_date(raw: Any) -> date | None:
    """Normalise a date value to a date.

    ISO dates (optionally with a time part) are read directly. Other dates
    that start with a four-digit year are parsed year-first; anything else
    is parsed day-first, as bank exports usually are.

    Args:
        raw: Date, datetime or date string.

    Returns:
        Parsed date, or None if the value is empty or unparseable.
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw

    text = str(raw or "").strip()
    if not text:
        return None

    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass

    try:
        if YEAR_FIRST_PATTERN.match(text):
            parsed = pd.to_datetime(text, yearfirst=True, dayfirst=False)
        else:
            parsed = pd.to_datetime(text, dayfirst=True)
    except (ValueError, pd.errors.ParserError):
        return None

    if pd.isna(parsed):
        return None
    return parsed.date()


def parse_expense_record(raw: dict[str, Any]) -> ClassifiedExpense | None:
    """Parse an exported expense record.

    Records without a valid priority are classified on the way in.

    Args:
        raw: Record with amount, category, description, date and optional priority.

    Returns:
        ClassifiedExpense, or None if the row has no usable date or amount.
    """
    amount = parse_amount(raw.get("amount"))
    if not math.isfinite(amount) or amount <= 0:
        logger.debug("Skipping expense without a positive amount", extra={"record": str(raw)})
        return None

    expense_date = normalize_date(raw.get("date"))
    if expense_date is None:
        logger.debug("Skipping expense without a valid date", extra={"record": str(raw)})
        return None

    category = str(raw.get("category") or "").strip()
    description = str(raw.get("description") or "").strip()

    priority = raw.get("priority")
    if priority not in PRIORITIES:
        priority = classify_expense(amount, category, description)

    return ClassifiedExpense(
        amount=Money(amount),
        category=CategoryName(category),
        date=expense_date,
        priority=priority,
        description=Description(description),
    )


def parse_budget_record(raw: dict[str, Any]) -> Budget | None:
    """Parse an exported budget record.

    Args:
        raw: Record with amount, timeframe and optional category.

    Returns:
        Budget, or None if the amount or timeframe is unusable.
    """
    amount = parse_amount(raw.get("amount"))
    if not math.isfinite(amount) or amount <= 0:
        return None

    timeframe = str(raw.get("timeframe") or "").strip().lower()
    if timeframe not in TIMEFRAMES:
        logger.debug("Skipping budget with unknown timeframe", extra={"timeframe": timeframe})
        return None

    category = str(raw.get("category") or "").strip() or ALL_CATEGORIES

    return Budget(amount=Money(amount), timeframe=timeframe, category=CategoryName(category))


def parse_expense_records(rows: list[dict[str, Any]]) -> list[ClassifiedExpense]:
    """Parse many expense records, dropping the unusable ones."""
    parsed = (parse_expense_record(row) for row in rows)
    return [expense for expense in parsed if expense is not None]


def parse_budget_records(rows: list[dict[str, Any]]) -> list[Budget]:
    """Parse many budget records, dropping the unusable ones."""
    parsed = (parse_budget_record(row) for row in rows)
    return [budget for budget in parsed if budget is not None]


def analyze_csv_columns(headers: list[str]) -> dict[str, str]:
    """Analyze CSV headers and suggest column mappings.

    Args:
        headers: List of CSV column names.

    Returns:
        Dictionary with suggested mappings for date, description, amount and
        category (empty string if not detected).
    """
    mappings: dict[str, str] = {
        "date": "",
        "description": "",
        "amount": "",
        "category": "",
        "priority": "",
    }

    headers_lower = [h.lower().strip() for h in headers]

    for i, header in enumerate(headers_lower):
        if not mappings["date"] and "date" in header:
            mappings["date"] = headers[i]

        if not mappings["description"]:
            if "merchant" in header and "name" in header:
                mappings["description"] = headers[i]
            elif "description" in header or header in ("note", "notes", "memo"):
                mappings["description"] = headers[i]

        if not mappings["amount"] and "amount" in header and "currency" not in header:
            mappings["amount"] = headers[i]

        if not mappings["category"] and "category" in header:
            mappings["category"] = headers[i]

        if not mappings["priority"] and "priority" in header:
            mappings["priority"] = headers[i]

    return mappings


def remap_csv_row(row: dict[str, str], mapping: dict[str, str]) -> dict[str, str]:
    """Rename a CSV row's columns to expense record fields.

    Args:
        row: CSV row as dictionary.
        mapping: Column mapping from analyze_csv_columns.

    Returns:
        Record dictionary keyed by expense field name.
    """
    return {field: row.get(column, "") for field, column in mapping.items() if column}
