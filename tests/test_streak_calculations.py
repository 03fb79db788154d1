from datetime import date

import pytest

from visit_tracker.services.streak_calculations import TimePeriod
from visit_tracker.services.streak_calculations import current_streak
from visit_tracker.services.streak_calculations import day_of_week
from visit_tracker.services.streak_calculations import days_in_period
from visit_tracker.services.streak_calculations import has_visit
from visit_tracker.services.streak_calculations import is_future_date
from visit_tracker.services.streak_calculations import longest_streak
from visit_tracker.services.streak_calculations import month_name
from visit_tracker.services.streak_calculations import total_visits


TODAY = date(2024, 3, 10)


def test_total_visits_counts_distinct_dates() -> None:
    visits = ["2024-03-01", "2024-03-02", "2024-03-01"]

    assert total_visits(visits) == 2
    assert total_visits([]) == 0


@pytest.mark.parametrize(
    ("visits", "expected"),
    [
        ([], 0),
        (["2024-03-10"], 1),
        (["2024-03-09", "2024-03-08"], 2),
        (["2024-03-10", "2024-03-08"], 1),
        (["2024-03-09", "2024-03-10"], 2),
        (["2024-03-09"], 1),
        (["2024-03-08", "2024-03-07"], 0),
    ],
)
def test_current_streak_counts_back_from_today_or_yesterday(
    visits: list[str], expected: int
) -> None:
    assert current_streak(visits, TODAY) == expected


def test_current_streak_crosses_leap_day() -> None:
    visits = ["2024-02-28", "2024-02-29", "2024-03-01"]

    assert current_streak(visits, date(2024, 3, 1)) == 3


def test_current_streak_ignores_future_visits() -> None:
    assert current_streak(["2024-03-11", "2024-03-10"], TODAY) == 1


def test_longest_streak_stops_at_gap() -> None:
    visits = ["2024-01-01", "2024-01-02", "2024-01-04"]

    assert longest_streak(visits) == 2


def test_longest_streak_handles_unsorted_duplicates() -> None:
    visits = ["2024-01-03", "2024-01-01", "2024-01-02", "2024-01-02"]

    assert longest_streak(visits) == 3


def test_longest_streak_spans_year_boundary() -> None:
    assert longest_streak(["2024-01-01", "2023-12-31", "2023-12-30"]) == 3


def test_longest_streak_empty_and_single() -> None:
    assert longest_streak([]) == 0
    assert longest_streak(["2024-05-05"]) == 1


def test_longest_streak_is_monotonic_and_bounds_current_streak() -> None:
    additions = [
        "2024-03-10",
        "2024-02-01",
        "2024-03-08",
        "2024-02-02",
        "2024-03-09",
        "2024-02-03",
        "2024-02-04",
    ]
    visits: list[str] = []
    previous_longest = 0

    for value in additions:
        visits.append(value)
        longest = longest_streak(visits)

        assert longest >= previous_longest
        assert longest >= current_streak(visits, TODAY)
        previous_longest = longest

    assert previous_longest == 4


def test_day_of_week_is_monday_based() -> None:
    assert day_of_week("2024-03-04") == 0
    assert day_of_week("2024-03-06") == 2
    assert day_of_week("2024-03-10") == 6


def test_month_name_returns_full_name() -> None:
    assert month_name("2024-01") == "January"
    assert month_name("2024-02") == "February"
    assert month_name("2023-12") == "December"


def test_is_future_date_compares_against_today() -> None:
    assert is_future_date("2024-03-11", TODAY)
    assert not is_future_date("2024-03-10", TODAY)
    assert not is_future_date("2023-12-31", TODAY)


def test_has_visit_checks_membership() -> None:
    assert has_visit({"2024-03-10"}, "2024-03-10")
    assert not has_visit({"2024-03-10"}, "2024-03-09")


@pytest.mark.parametrize(
    "today",
    [date(2024, 3, 4), date(2024, 3, 6), date(2024, 3, 10), date(2024, 12, 31)],
)
def test_week_period_has_seven_days_starting_monday(today: date) -> None:
    days = days_in_period(TimePeriod.WEEK, today)

    assert len(days) == 7
    assert day_of_week(days[0]) == 0
    assert today.isoformat() in days


def test_week_period_crosses_year_boundary() -> None:
    days = days_in_period(TimePeriod.WEEK, date(2025, 1, 1))

    assert days[0] == "2024-12-30"
    assert days[-1] == "2025-01-05"


@pytest.mark.parametrize(
    ("today", "expected_length"),
    [
        (date(2024, 2, 10), 29),
        (date(2023, 2, 10), 28),
        (date(2100, 2, 1), 28),
        (date(2000, 2, 1), 29),
        (date(2024, 4, 30), 30),
        (date(2024, 3, 10), 31),
    ],
)
def test_month_period_matches_calendar_length(
    today: date, expected_length: int
) -> None:
    days = days_in_period(TimePeriod.MONTH, today)

    assert len(days) == expected_length
    assert days[0] == today.replace(day=1).isoformat()


def test_year_period_covers_whole_year() -> None:
    leap_days = days_in_period(TimePeriod.YEAR, date(2024, 6, 1))
    common_days = days_in_period(TimePeriod.YEAR, date(2023, 6, 1))

    assert len(leap_days) == 366
    assert leap_days[0] == "2024-01-01"
    assert leap_days[-1] == "2024-12-31"
    assert len(common_days) == 365
    assert leap_days == sorted(leap_days)


def test_days_in_period_returns_fresh_list_each_call() -> None:
    first = days_in_period(TimePeriod.WEEK, TODAY)
    first.append("mutated")

    assert days_in_period(TimePeriod.WEEK, TODAY)[-1] == "2024-03-10"
