import calendar
from collections.abc import Iterable
from datetime import date
from datetime import timedelta
from enum import StrEnum


FULL_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

ONE_DAY = timedelta(days=1)


class TimePeriod(StrEnum):
    """Calendar window selecting the grid layout."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


def format_date(day: date) -> str:
    """Format a date as a zero-padded `YYYY-MM-DD` visit key."""

    return day.isoformat()


def parse_date(value: str) -> date:
    return date.fromisoformat(value)


def has_visit(visits: Iterable[str], date_str: str) -> bool:
    return date_str in visits


def is_future_date(date_str: str, today: date) -> bool:
    """Return True when date_str falls after today.

    Zero-padded ISO strings sort chronologically, so plain string comparison
    is enough.
    """

    return date_str > format_date(today)


def total_visits(visits: Iterable[str]) -> int:
    """Count distinct visit dates."""

    return len(set(visits))


def current_streak(visits: Iterable[str], today: date) -> int:
    """Count consecutive visited days ending today.

    An unvisited today does not break the streak yet: counting then starts
    from yesterday.
    """

    visit_set = set(visits)
    cursor = today
    if format_date(cursor) not in visit_set:
        cursor -= ONE_DAY

    streak = 0
    while format_date(cursor) in visit_set:
        streak += 1
        cursor -= ONE_DAY
    return streak


def longest_streak(visits: Iterable[str]) -> int:
    """Return the longest run of consecutive visited days in the history."""

    ordered_days = sorted({parse_date(value) for value in visits})
    if not ordered_days:
        return 0

    longest = 1
    running = 1
    for previous_day, next_day in zip(ordered_days, ordered_days[1:]):
        if next_day - previous_day == ONE_DAY:
            running += 1
            longest = max(longest, running)
        else:
            running = 1
    return longest


def day_of_week(date_str: str) -> int:
    """Return the Monday-based weekday index (Monday=0, Sunday=6)."""

    return parse_date(date_str).weekday()


def month_name(year_month_key: str) -> str:
    """Return the full month name for a `YYYY-MM` key."""

    month = int(year_month_key[5:7])
    return FULL_MONTH_NAMES[month - 1]


def _date_range(first_day: date, last_day: date) -> list[str]:
    days: list[str] = []
    current_day = first_day
    while current_day <= last_day:
        days.append(format_date(current_day))
        current_day += ONE_DAY
    return days


def days_in_period(period: TimePeriod, today: date) -> list[str]:
    """List the dates of the period containing today, in calendar order.

    week: Monday to Sunday of the current week.
    month: day 1 to the last day of the current month.
    year: January 1 to December 31 of the current year.
    """

    if period == TimePeriod.WEEK:
        monday = today - timedelta(days=today.weekday())
        return _date_range(monday, monday + timedelta(days=6))

    if period == TimePeriod.MONTH:
        last_day = calendar.monthrange(today.year, today.month)[1]
        return _date_range(
            date(today.year, today.month, 1),
            date(today.year, today.month, last_day),
        )

    return _date_range(date(today.year, 1, 1), date(today.year, 12, 31))
