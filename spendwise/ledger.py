"""Read exported expense and budget records from disk."""

import csv
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from spendwise.domain.models import Budget, ClassifiedExpense
from spendwise.domain.records import (
    analyze_csv_columns,
    parse_budget_records,
    parse_expense_records,
    remap_csv_row,
)

logger = logging.getLogger(__name__)


class LedgerError(Exception):
    """Ledger file is missing or cannot be read."""

    pass


@dataclass
class Ledger:
    """Expenses and budgets loaded from an export."""

    expenses: list[ClassifiedExpense] = field(default_factory=list)
    budgets: list[Budget] = field(default_factory=list)


def load_ledger(path: Path) -> Ledger:
    """Load a JSON ledger export.

    The document is either {"expenses": [...], "budgets": [...]} or a bare
    list of expense records.

    Args:
        path: Path to the JSON file.

    Returns:
        Ledger with parsed expenses and budgets.

    Raises:
        LedgerError: If the file is missing or is not a valid ledger.
    """
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except FileNotFoundError:
        raise LedgerError(f"Ledger not found: {path}")
    except UnicodeDecodeError:
        raise LedgerError(f"Ledger is not valid UTF-8: {path}")
    except json.JSONDecodeError as e:
        raise LedgerError(f"Invalid JSON in {path}: {e}")

    if isinstance(document, list):
        raw_expenses, raw_budgets = document, []
    elif isinstance(document, dict):
        raw_expenses = document.get("expenses", [])
        raw_budgets = document.get("budgets", [])
    else:
        raise LedgerError(f"Unexpected ledger format in {path}")

    if not isinstance(raw_expenses, list) or not isinstance(raw_budgets, list):
        raise LedgerError(f"'expenses' and 'budgets' must be lists in {path}")

    rows = [row for row in raw_expenses if isinstance(row, dict)]
    budget_rows = [row for row in raw_budgets if isinstance(row, dict)]

    ledger = Ledger(expenses=parse_expense_records(rows), budgets=parse_budget_records(budget_rows))

    logger.info(
        "Ledger loaded",
        extra={
            "path": str(path),
            "expenses": len(ledger.expenses),
            "skipped_expenses": len(raw_expenses) - len(ledger.expenses),
            "budgets": len(ledger.budgets),
        },
    )
    return ledger


def load_expenses_csv(path: Path) -> list[ClassifiedExpense]:
    """Load expenses from a CSV export.

    Columns are detected from the header row; date and amount are required.

    Args:
        path: Path to the CSV file.

    Returns:
        List of parsed expenses.

    Raises:
        LedgerError: If the file is missing or lacks date/amount columns.
    """
    try:
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            mapping = analyze_csv_columns(list(reader.fieldnames or []))

            if not mapping["date"] or not mapping["amount"]:
                raise LedgerError(f"Could not detect date and amount columns in {path}")

            rows = [remap_csv_row(row, mapping) for row in reader]
    except FileNotFoundError:
        raise LedgerError(f"CSV file not found: {path}")
    except UnicodeDecodeError:
        raise LedgerError(f"CSV file is not valid UTF-8: {path}")

    expenses = parse_expense_records(rows)
    logger.info("CSV expenses loaded", extra={"path": str(path), "expenses": len(expenses), "rows": len(rows)})
    return expenses
