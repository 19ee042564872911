"""Pure functions for spending analysis and savings recommendations.

This module contains the functional core for recommendations:
- No I/O operations (no files, no console)
- No hidden clock: the reference date is passed in
- Pure data transformations
- Easy to test

The engine consumes expenses whose priority was attached at entry time by
spendwise.domain.classifier and produces at most five advisory entries,
most salient first.
"""

import logging
from dataclasses import dataclass
from datetime import date

from spendwise.dates import same_month
from spendwise.domain.models import (
    Budget,
    CategoryName,
    ClassifiedExpense,
    Money,
    Recommendation,
)

logger = logging.getLogger(__name__)

# Below this many expenses only onboarding tips are returned
MIN_EXPENSES_FOR_ANALYSIS = 5
MAX_RECOMMENDATIONS = 5

TOP_CATEGORY_SHARE_THRESHOLD = 30.0
TOP_CATEGORY_CUT = 0.2
LEAST_IMPORTANT_CUT = 0.5
ANNUAL_INVESTMENT_RETURN = 0.12
NEEDS_SHARE = 0.5
WANTS_SHARE = 0.3
SAVINGS_SHARE = 0.2
STATIC_TIPS_SAVINGS = Money(4000)

DEFAULT_CURRENCY = "₹"
FALLBACK_CATEGORY = CategoryName("Other")


@dataclass(frozen=True)
class TopCategory:
    """Immutable summary of the largest spending category."""

    name: CategoryName
    amount: Money
    percentage: float


@dataclass(frozen=True)
class SpendingAnalysis:
    """Immutable month-to-date spending analysis."""

    monthly_total: Money
    by_category: dict[CategoryName, Money]
    top_category: TopCategory
    least_important: Money


def format_money(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    """Format an amount with currency symbol and two decimals."""
    return f"{currency}{amount:,.2f}"


def starter_recommendations() -> list[Recommendation]:
    """Onboarding tips returned while there is too little history to analyse."""
    return [
        Recommendation(
            icon="👋",
            text=(
                "Welcome! Start by tracking all expenses for 2-3 weeks. "
                "This helps provide personalized recommendations to optimize your spending."
            ),
            savings=Money(0),
            severity="info",
        ),
        Recommendation(
            icon="🎯",
            text=(
                "Set weekly and monthly budgets for different categories. "
                "Aim to stay within 90% of your budget to build a savings cushion."
            ),
            savings=Money(0),
            severity="info",
        ),
        Recommendation(
            icon="💡",
            text=(
                "Pro tip: Categorize expenses honestly. "
                "Each expense is classified by priority automatically to show where to cut costs."
            ),
            savings=Money(0),
            severity="success",
        ),
    ]


def calculate_category_totals(expenses: list[ClassifiedExpense]) -> dict[CategoryName, Money]:
    """Sum expense amounts per category, in first-seen order.

    Args:
        expenses: Expenses to aggregate.

    Returns:
        Dictionary of category totals.
    """
    totals: dict[CategoryName, Money] = {}
    for expense in expenses:
        totals[expense.category] = Money(totals.get(expense.category, 0.0) + expense.amount)
    return totals


def find_top_category(by_category: dict[CategoryName, Money], total: Money) -> TopCategory:
    """Find the category with the largest total.

    Ties go to the category seen first. The share of an empty month is 0%.

    Args:
        by_category: Category totals in first-seen order.
        total: Total across all categories.

    Returns:
        TopCategory with name, amount and percentage share.
    """
    if not by_category:
        return TopCategory(name=FALLBACK_CATEGORY, amount=Money(0), percentage=0.0)

    name = next(iter(by_category))
    for category, amount in by_category.items():
        if amount > by_category[name]:
            name = category

    amount = by_category[name]
    percentage = amount * 100 / total if total > 0 else 0.0

    return TopCategory(name=name, amount=amount, percentage=percentage)


def analyze_spending(expenses: list[ClassifiedExpense], today: date) -> SpendingAnalysis:
    """Analyse spending in the calendar month of the reference date.

    Args:
        expenses: Full expense history.
        today: Reference date selecting the month.

    Returns:
        SpendingAnalysis for that month.
    """
    monthly = [expense for expense in expenses if same_month(expense.date, today)]

    monthly_total = Money(sum(expense.amount for expense in monthly))
    by_category = calculate_category_totals(monthly)
    least_important = Money(sum(e.amount for e in monthly if e.priority == "least_important"))

    return SpendingAnalysis(
        monthly_total=monthly_total,
        by_category=by_category,
        top_category=find_top_category(by_category, monthly_total),
        least_important=least_important,
    )


def find_budget(budgets: list[Budget], timeframe: str) -> Budget | None:
    """Return the first budget for a timeframe, or None."""
    for budget in budgets:
        if budget.timeframe == timeframe:
            return budget
    return None


def top_category_recommendation(top: TopCategory, currency: str) -> Recommendation:
    """Suggest trimming the dominant category by a fifth."""
    savings = Money(top.amount * TOP_CATEGORY_CUT)
    return Recommendation(
        icon="🎯",
        text=(
            f"Your '{top.name}' expenses are {top.percentage:.1f}% of total spending "
            f"({format_money(top.amount, currency)}). "
            f"Reduce by 20% to save {format_money(savings, currency)} monthly."
        ),
        savings=savings,
        severity="warning",
    )


def least_important_recommendation(least_important: Money, currency: str) -> Recommendation:
    """Suggest halving least important spending and investing the difference."""
    savings = Money(least_important * LEAST_IMPORTANT_CUT)
    yearly_gain = savings * ANNUAL_INVESTMENT_RETURN
    return Recommendation(
        icon="💡",
        text=(
            f"You're spending {format_money(least_important, currency)} on least important items. "
            f"Cut 50% and invest in mutual funds "
            f"(12% annual returns = {format_money(yearly_gain, currency)} yearly gain)."
        ),
        savings=savings,
        severity="success",
    )


def budget_overrun_recommendation(overspend: Money, top: TopCategory, currency: str) -> Recommendation:
    """Warn that the monthly budget has been exceeded."""
    return Recommendation(
        icon="⚠️",
        text=(
            f"You've exceeded your monthly budget by {format_money(overspend, currency)}. "
            f"Focus on reducing '{top.name}' expenses and avoid unnecessary shopping."
        ),
        savings=overspend,
        severity="danger",
    )


def savings_rule_recommendation(monthly_total: Money, currency: str) -> Recommendation:
    """Apply the 50/30/20 needs/wants/savings split to the month's spending."""
    needs = monthly_total * NEEDS_SHARE
    wants = monthly_total * WANTS_SHARE
    savings = Money(monthly_total * SAVINGS_SHARE)
    return Recommendation(
        icon="💰",
        text=(
            f"Follow the 50-30-20 rule: 50% needs ({format_money(needs, currency)}), "
            f"30% wants ({format_money(wants, currency)}), "
            f"20% savings ({format_money(savings, currency)}). Invest savings in SIP/PPF."
        ),
        savings=savings,
        severity="info",
    )


def saving_tips_recommendation(currency: str) -> Recommendation:
    """Fixed list of everyday saving tips."""
    return Recommendation(
        icon="📝",
        text=(
            "Smart saving tips: 1) Use cashback apps (save 5-10%), "
            f"2) Cook at home 5 days/week (save {currency}4000/month), "
            "3) Cancel unused subscriptions, 4) Buy groceries in bulk (save 15%), "
            "5) Use public transport 2x/week."
        ),
        savings=STATIC_TIPS_SAVINGS,
        severity="info",
    )


def generate_recommendations(
    expenses: list[ClassifiedExpense],
    budgets: list[Budget],
    today: date | None = None,
    currency: str = DEFAULT_CURRENCY,
) -> list[Recommendation]:
    """Build the ranked list of savings recommendations.

    Args:
        expenses: Full expense history with priorities attached.
        budgets: User budgets; the first monthly one is compared to spending.
        today: Reference date selecting the current month (default: today).
        currency: Currency symbol used in message texts.

    Returns:
        Between 1 and 5 recommendations, most salient first.
    """
    if len(expenses) < MIN_EXPENSES_FOR_ANALYSIS:
        logger.debug("Not enough history, returning starter tips", extra={"expense_count": len(expenses)})
        return starter_recommendations()

    if today is None:
        today = date.today()

    analysis = analyze_spending(expenses, today)
    recommendations: list[Recommendation] = []

    if analysis.top_category.percentage > TOP_CATEGORY_SHARE_THRESHOLD:
        recommendations.append(top_category_recommendation(analysis.top_category, currency))

    if analysis.least_important > 0:
        recommendations.append(least_important_recommendation(analysis.least_important, currency))

    monthly_budget = find_budget(budgets, "monthly")
    if monthly_budget and analysis.monthly_total > monthly_budget.amount:
        overspend = Money(analysis.monthly_total - monthly_budget.amount)
        recommendations.append(budget_overrun_recommendation(overspend, analysis.top_category, currency))

    recommendations.append(savings_rule_recommendation(analysis.monthly_total, currency))
    recommendations.append(saving_tips_recommendation(currency))

    logger.debug(
        "Recommendations generated",
        extra={"monthly_total": analysis.monthly_total, "count": len(recommendations)},
    )

    return recommendations[:MAX_RECOMMENDATIONS]
