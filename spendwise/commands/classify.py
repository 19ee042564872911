"""Classify command for tagging a single expense with a priority."""

from dataclasses import asdict

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from spendwise.domain.classifier import ExpenseFeatures, explain_classification
from spendwise.domain.summary import format_priority_label

console = Console()

PRIORITY_STYLES = {
    "most_important": "bold red",
    "important": "yellow",
    "less_important": "cyan",
    "least_important": "dim",
}


def render_features(features: ExpenseFeatures) -> None:
    """Render the flags that fired for a classification."""
    table = Table(title="Matched features")
    table.add_column("Feature", style="cyan")

    for name, value in asdict(features).items():
        if name.startswith("is_") and value:
            table.add_row(name[3:].replace("_", " "))

    if table.row_count:
        console.print(table)
    else:
        console.print("[dim]No features matched[/dim]")


def classify_command(
    amount: str,
    category: str,
    description: str = "",
    explain: bool = False,
) -> None:
    """Classify an expense and print its priority."""
    result = explain_classification(amount, category, description)

    style = PRIORITY_STYLES[result.priority]
    console.print(f"Priority: [{style}]{result.priority}[/{style}] ({format_priority_label(result.priority)})")

    if explain:
        console.print(f"Score: {result.score}")
        console.print(f"[dim]Category: {escape(result.features.category) or '-'}[/dim]")
        render_features(result.features)
