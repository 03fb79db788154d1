from collections.abc import Iterable
from datetime import date
from datetime import timedelta

from visit_tracker.services.streak_calculations import TimePeriod
from visit_tracker.services.streak_calculations import day_of_week
from visit_tracker.services.streak_calculations import days_in_period
from visit_tracker.services.streak_calculations import format_date
from visit_tracker.services.streak_calculations import has_visit
from visit_tracker.services.streak_calculations import is_future_date
from visit_tracker.services.streak_calculations import month_name
from visit_tracker.services.streak_calculations import parse_date


DAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
DAYS_PER_WEEK = 7


def cell_status(is_visited: bool, is_future: bool) -> str:
    if is_future:
        return "future"
    if is_visited:
        return "visited"
    return "empty"


def cell_tooltip(date_str: str, is_visited: bool, is_future: bool) -> str:
    if is_future:
        return f"{date_str} (future)"
    if is_visited:
        return f"{date_str} ✓"
    return date_str


def build_day_cell(
    date_str: str, visit_set: set[str], today: date
) -> dict[str, str | bool]:
    """Annotate one date with its visited and future flags.

    Future dates are never reported as visited.
    """

    is_future = is_future_date(date_str, today)
    is_visited = not is_future and has_visit(visit_set, date_str)
    return {
        "date": date_str,
        "is_visited": is_visited,
        "is_future": is_future,
        "status": cell_status(is_visited, is_future),
        "tooltip": cell_tooltip(date_str, is_visited, is_future),
    }


def full_week_days(days: list[str]) -> list[str | None]:
    """Return Monday..Sunday of the week containing the first day in days."""

    if not days:
        return [None] * DAYS_PER_WEEK

    first_day = parse_date(days[0])
    monday = first_day - timedelta(days=first_day.weekday())
    return [
        format_date(monday + timedelta(days=offset))
        for offset in range(DAYS_PER_WEEK)
    ]


def group_into_columns(days: list[str]) -> list[list[str | None]]:
    """Group dates into Monday-based week columns.

    Row index is the weekday, so the first column is left-padded with None
    and a column is closed after every Sunday.
    """

    columns: list[list[str | None]] = []
    current_column: list[str | None] = [None] * DAYS_PER_WEEK

    for day in days:
        weekday = day_of_week(day)
        current_column[weekday] = day
        if weekday == DAYS_PER_WEEK - 1:
            columns.append(current_column)
            current_column = [None] * DAYS_PER_WEEK

    if any(day is not None for day in current_column):
        columns.append(current_column)

    return columns


def month_labels(columns: list[list[str | None]]) -> list[str]:
    """Label the first column in which each month appears."""

    labels: list[str] = []
    last_month_key = ""
    for column in columns:
        first_day = next((day for day in column if day is not None), None)
        if first_day is None:
            labels.append("")
            continue

        month_key = first_day[:7]
        if month_key != last_month_key:
            labels.append(month_name(month_key))
            last_month_key = month_key
        else:
            labels.append("")
    return labels


def _cells_for_columns(
    columns: list[list[str | None]], visit_set: set[str], today: date
) -> list[list[dict[str, str | bool] | None]]:
    return [
        [
            build_day_cell(day, visit_set, today) if day is not None else None
            for day in column
        ]
        for column in columns
    ]


def _grid_payload(
    period: TimePeriod,
    today: date,
    title: str | None,
    columns: list[list[dict[str, str | bool] | None]],
    labels: list[str],
) -> dict[str, object]:
    return {
        "period": period.value,
        "reference_date": format_date(today),
        "title": title,
        "day_labels": list(DAY_LABELS),
        "columns": columns,
        "labels": labels,
    }


def compose_week_grid(
    visits: Iterable[str], days: list[str], today: date
) -> dict[str, object]:
    """Build the single Monday..Sunday column of the week view."""

    week_days = full_week_days(days)
    columns = _cells_for_columns([week_days], set(visits), today)
    return _grid_payload(TimePeriod.WEEK, today, None, columns, [])


def compose_month_grid(visits: Iterable[str], today: date) -> dict[str, object]:
    """Build the week columns covering every day of today's month."""

    days = days_in_period(TimePeriod.MONTH, today)
    columns = _cells_for_columns(group_into_columns(days), set(visits), today)
    title = month_name(format_date(today)[:7])
    return _grid_payload(TimePeriod.MONTH, today, title, columns, [])


def compose_year_grid(visits: Iterable[str], today: date) -> dict[str, object]:
    """Build a continuous strip of week columns for today's whole year.

    Each column gets a label; only the column where a month first appears
    carries the month name.
    """

    days = days_in_period(TimePeriod.YEAR, today)
    day_columns = group_into_columns(days)
    columns = _cells_for_columns(day_columns, set(visits), today)
    return _grid_payload(
        TimePeriod.YEAR,
        today,
        str(today.year),
        columns,
        month_labels(day_columns),
    )


def compose_grid(
    period: TimePeriod, visits: Iterable[str], today: date
) -> dict[str, object]:
    if period == TimePeriod.WEEK:
        return compose_week_grid(visits, days_in_period(period, today), today)
    if period == TimePeriod.MONTH:
        return compose_month_grid(visits, today)
    return compose_year_grid(visits, today)
