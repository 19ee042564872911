"""Tests for spendwise.domain.recommendations pure functions."""

from datetime import date

import pytest

from spendwise.domain.models import (
    Budget,
    CategoryName,
    ClassifiedExpense,
    Money,
    Priority,
)
from spendwise.domain.recommendations import (
    analyze_spending,
    find_budget,
    find_top_category,
    generate_recommendations,
    starter_recommendations,
)


def expense(amount: float, category: str, priority: Priority = "important", day: int = 1) -> ClassifiedExpense:
    """Build a March 2025 expense."""
    return ClassifiedExpense(
        amount=Money(amount),
        category=CategoryName(category),
        date=date(2025, 3, day),
        priority=priority,
    )


class TestStarterRecommendations:
    """Tests for the cold-start response."""

    def test_fewer_than_five_expenses_returns_starter_tips(self, today: date, monthly_budget: Budget) -> None:
        """Should ignore history and budgets below five expenses."""
        expenses = [expense(9000, "food", "least_important") for _ in range(4)]

        result = generate_recommendations(expenses, [monthly_budget], today)

        assert result == starter_recommendations()
        assert len(result) == 3
        assert all(rec.savings == 0 for rec in result)

    def test_empty_history(self, today: date) -> None:
        """Should return starter tips for no expenses at all."""
        assert generate_recommendations([], [], today) == starter_recommendations()

    def test_starter_severities(self) -> None:
        """Should tag the onboarding tips as info, info, success."""
        assert [rec.severity for rec in starter_recommendations()] == ["info", "info", "success"]


class TestAnalyzeSpending:
    """Tests for analyze_spending."""

    def test_filters_to_reference_month(self, today: date) -> None:
        """Should only count expenses in the reference month and year."""
        expenses = [
            expense(100, "food"),
            ClassifiedExpense(Money(900), CategoryName("food"), date(2025, 2, 28), "important"),
            ClassifiedExpense(Money(900), CategoryName("food"), date(2024, 3, 10), "important"),
        ]

        analysis = analyze_spending(expenses, today)

        assert analysis.monthly_total == 100

    def test_category_totals_and_least_important(self, march_expenses: list[ClassifiedExpense], today: date) -> None:
        """Should sum per category and the least important spend."""
        analysis = analyze_spending(march_expenses, today)

        assert analysis.monthly_total == 7000
        assert analysis.by_category == {"food": 5000, "rent": 1000, "transport": 500, "misc": 500}
        assert analysis.least_important == 5000
        assert analysis.top_category.name == "food"
        assert analysis.top_category.percentage == pytest.approx(71.43, abs=0.01)

    def test_tie_goes_to_first_category(self, today: date) -> None:
        """Should keep the first category seen when totals tie."""
        analysis = analyze_spending([expense(500, "food"), expense(500, "rent")], today)

        assert analysis.top_category.name == "food"

    def test_empty_month_has_zero_share(self, today: date) -> None:
        """Should report 0% rather than dividing by zero."""
        old = [ClassifiedExpense(Money(100), CategoryName("food"), date(2025, 1, 5), "important")]

        analysis = analyze_spending(old, today)

        assert analysis.monthly_total == 0
        assert analysis.top_category.name == "Other"
        assert analysis.top_category.amount == 0
        assert analysis.top_category.percentage == 0.0


class TestFindTopCategory:
    """Tests for find_top_category."""

    def test_zero_total_share(self) -> None:
        """Should not divide by a zero total."""
        top = find_top_category({CategoryName("food"): Money(0)}, Money(0))

        assert top.name == "food"
        assert top.percentage == 0.0


class TestFindBudget:
    """Tests for find_budget."""

    def test_uses_first_match(self) -> None:
        """Should return the first budget with the timeframe."""
        budgets = [
            Budget(Money(100), "weekly"),
            Budget(Money(10000), "monthly"),
            Budget(Money(1), "monthly"),
        ]

        assert find_budget(budgets, "monthly") == budgets[1]
        assert find_budget([], "monthly") is None


class TestGenerateRecommendations:
    """Tests for generate_recommendations."""

    def test_all_entries_fire_in_order(
        self,
        march_expenses: list[ClassifiedExpense],
        monthly_budget: Budget,
        today: date,
    ) -> None:
        """Should build top category, least important, overrun, 50/30/20 and tips."""
        result = generate_recommendations(march_expenses, [monthly_budget], today)

        assert [rec.severity for rec in result] == ["warning", "success", "danger", "info", "info"]
        assert [rec.savings for rec in result] == pytest.approx([1000, 2500, 1000, 1400, 4000])

    def test_never_more_than_five(
        self,
        march_expenses: list[ClassifiedExpense],
        monthly_budget: Budget,
        today: date,
    ) -> None:
        """Should cap the list at five entries."""
        result = generate_recommendations(march_expenses * 4, [monthly_budget] * 3, today)

        assert len(result) <= 5

    def test_top_category_text(self, march_expenses: list[ClassifiedExpense], today: date) -> None:
        """Should name the category and its share."""
        top = generate_recommendations(march_expenses, [], today)[0]

        assert "'food'" in top.text
        assert "71.4%" in top.text
        assert "₹5,000.00" in top.text

    def test_least_important_text_quotes_yearly_gain(self, march_expenses: list[ClassifiedExpense], today: date) -> None:
        """Should quote 12% of the halved spend as yearly gain."""
        least = generate_recommendations(march_expenses, [], today)[1]

        assert least.savings == pytest.approx(2500)
        assert "₹300.00 yearly gain" in least.text

    def test_top_category_requires_more_than_thirty_percent(self, today: date) -> None:
        """Should not fire at exactly 30%."""
        expenses = [
            expense(150, "food"),
            expense(150, "food"),
            expense(250, "rent"),
            expense(250, "transport"),
            expense(200, "misc"),
        ]

        result = generate_recommendations(expenses, [], today)

        assert all(rec.severity != "warning" for rec in result)

    def test_top_category_fires_just_above_thirty_percent(self, today: date) -> None:
        """Should fire once the share strictly exceeds 30%."""
        expenses = [
            expense(151, "food"),
            expense(150, "food"),
            expense(250, "rent"),
            expense(250, "transport"),
            expense(200, "misc"),
        ]

        result = generate_recommendations(expenses, [], today)

        assert result[0].severity == "warning"
        assert result[0].savings == pytest.approx(301 * 0.2)

    def test_budget_overrun_savings_is_exact_difference(
        self,
        march_expenses: list[ClassifiedExpense],
        today: date,
    ) -> None:
        """Should report the overrun as monthly total minus budget."""
        budget = Budget(Money(6500.5), "monthly")

        result = generate_recommendations(march_expenses, [budget], today)
        overrun = [rec for rec in result if rec.severity == "danger"]

        assert len(overrun) == 1
        assert overrun[0].savings == 7000 - 6500.5

    def test_no_overrun_within_budget(self, march_expenses: list[ClassifiedExpense], today: date) -> None:
        """Should skip the overrun alert when spending equals the budget."""
        result = generate_recommendations(march_expenses, [Budget(Money(7000), "monthly")], today)

        assert all(rec.severity != "danger" for rec in result)

    def test_weekly_budget_is_ignored(self, march_expenses: list[ClassifiedExpense], today: date) -> None:
        """Should only compare against monthly budgets."""
        result = generate_recommendations(march_expenses, [Budget(Money(10), "weekly")], today)

        assert all(rec.severity != "danger" for rec in result)

    def test_no_least_important_spend(self, today: date) -> None:
        """Should skip the least important alert when nothing is least important."""
        expenses = [expense(100, cat) for cat in ("a", "b", "c", "d", "e")]

        result = generate_recommendations(expenses, [], today)

        assert [rec.severity for rec in result] == ["info", "info"]

    def test_empty_month_with_history(self, today: date) -> None:
        """Should fall back to the always-on entries when this month is empty."""
        old = [
            ClassifiedExpense(Money(100), CategoryName("food"), date(2025, 2, d), "least_important")
            for d in range(1, 6)
        ]

        result = generate_recommendations(old, [Budget(Money(50), "monthly")], today)

        assert len(result) == 2
        assert result[0].savings == 0
        assert result[1].savings == 4000

    def test_custom_currency(self, march_expenses: list[ClassifiedExpense], today: date) -> None:
        """Should use the given currency symbol in texts."""
        result = generate_recommendations(march_expenses, [], today, currency="$")

        assert "$5,000.00" in result[0].text

    def test_repeatable(
        self,
        march_expenses: list[ClassifiedExpense],
        monthly_budget: Budget,
        today: date,
    ) -> None:
        """Should give identical lists for identical inputs."""
        first = generate_recommendations(march_expenses, [monthly_budget], today)
        second = generate_recommendations(march_expenses, [monthly_budget], today)

        assert first == second

    def test_does_not_mutate_inputs(
        self,
        march_expenses: list[ClassifiedExpense],
        monthly_budget: Budget,
        today: date,
    ) -> None:
        """Should leave the input lists untouched."""
        expenses = list(march_expenses)
        budgets = [monthly_budget]

        generate_recommendations(expenses, budgets, today)

        assert expenses == march_expenses
        assert budgets == [monthly_budget]

    def test_defaults_to_current_month(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should use today's month when no reference date is given."""

        class FixedDate(date):
            @classmethod
            def today(cls) -> "FixedDate":
                return cls(2025, 3, 15)

        monkeypatch.setattr("spendwise.domain.recommendations.date", FixedDate)
        expenses = [
            ClassifiedExpense(Money(100), CategoryName("food"), date(2025, 3, 2), "least_important") for _ in range(5)
        ]
        older = ClassifiedExpense(Money(900), CategoryName("food"), date(2025, 2, 2), "least_important")

        result = generate_recommendations([*expenses, older], [])

        assert result[0].severity == "warning"
        assert result[0].savings == pytest.approx(100)
