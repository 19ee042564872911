"""Tests for spendwise.dates pure functions."""

from datetime import date

from spendwise.dates import last_n_days, last_n_months, month_label, same_month


class TestSameMonth:
    """Tests for same_month."""

    def test_same_month_and_year(self) -> None:
        """Should match dates in the same calendar month."""
        assert same_month(date(2025, 3, 1), date(2025, 3, 31))

    def test_same_month_other_year(self) -> None:
        """Should not match the same month of another year."""
        assert not same_month(date(2024, 3, 15), date(2025, 3, 15))

    def test_adjacent_month(self) -> None:
        """Should not match the neighbouring month."""
        assert not same_month(date(2025, 2, 28), date(2025, 3, 1))


class TestLastNDays:
    """Tests for last_n_days."""

    def test_oldest_first_ending_today(self) -> None:
        """Should end on today and run oldest first."""
        days = last_n_days(date(2025, 3, 2), 3)

        assert days == [date(2025, 2, 28), date(2025, 3, 1), date(2025, 3, 2)]

    def test_leap_year(self) -> None:
        """Should include 29 February in leap years."""
        days = last_n_days(date(2024, 3, 1), 2)

        assert days == [date(2024, 2, 29), date(2024, 3, 1)]


class TestLastNMonths:
    """Tests for last_n_months."""

    def test_crosses_year_boundary(self) -> None:
        """Should roll back across January."""
        months = last_n_months(date(2025, 2, 10), 4)

        assert months == [(2024, 11), (2024, 12), (2025, 1), (2025, 2)]

    def test_twelve_months(self) -> None:
        """Should cover a full year ending this month."""
        months = last_n_months(date(2025, 12, 31), 12)

        assert months[0] == (2025, 1)
        assert months[-1] == (2025, 12)


def test_month_label() -> None:
    """Should give short month names."""
    assert month_label(2025, 1) == "Jan"
    assert month_label(2024, 12) == "Dec"
