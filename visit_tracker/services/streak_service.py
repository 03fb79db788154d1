import logging
from collections.abc import Iterable
from datetime import date

from visit_tracker.services.grid_composer import compose_grid
from visit_tracker.services.streak_calculations import TimePeriod
from visit_tracker.services.streak_calculations import current_streak
from visit_tracker.services.streak_calculations import days_in_period
from visit_tracker.services.streak_calculations import format_date
from visit_tracker.services.streak_calculations import longest_streak
from visit_tracker.services.streak_calculations import total_visits


logger = logging.getLogger(__name__)


def resolve_reference_date(reference_date: date | None = None) -> date:
    """Return reference_date, or read the local date once when it is missing."""

    if reference_date is not None:
        return reference_date
    return date.today()


def day_unit(value: int) -> str:
    return "day" if value == 1 else "days"


def build_stat_cards(
    current: int, longest: int, total: int
) -> list[dict[str, str | int]]:
    """Build the three stat cards shown above the grid."""

    if current > 0:
        current_description = "Keep it going!"
    else:
        current_description = "Start your streak today!"

    if current >= longest and current > 0:
        longest_description = "You're at your best!"
    else:
        longest_description = "Your personal record"

    cards = [
        ("current_streak", "Current Streak", current, current_description),
        ("longest_streak", "Longest Streak", longest, longest_description),
        ("total_visits", "Total Visits", total, "Days you've practiced"),
    ]
    return [
        {
            "key": key,
            "title": title,
            "value": value,
            "unit": day_unit(value),
            "description": description,
        }
        for key, title, value, description in cards
    ]


def build_stats_payload(
    visits: Iterable[str], reference_date: date | None = None
) -> dict[str, object]:
    """Compute streak statistics for visits as of the reference date."""

    today = resolve_reference_date(reference_date)
    visit_list = list(visits)

    current = current_streak(visit_list, today)
    longest = longest_streak(visit_list)
    total = total_visits(visit_list)
    logger.debug(
        "Computed stats for %s: current=%d longest=%d total=%d",
        today,
        current,
        longest,
        total,
    )

    return {
        "reference_date": format_date(today),
        "current_streak": current,
        "longest_streak": longest,
        "total_visits": total,
        "cards": build_stat_cards(current, longest, total),
    }


def build_grid_payload(
    visits: Iterable[str],
    period: TimePeriod,
    reference_date: date | None = None,
) -> dict[str, object]:
    """Compose the contribution grid for period as of the reference date."""

    today = resolve_reference_date(reference_date)
    payload = compose_grid(period, list(visits), today)
    logger.debug(
        "Composed %s grid for %s with %d columns",
        period.value,
        today,
        len(payload["columns"]),
    )
    return payload


def build_period_days_payload(
    period: TimePeriod, reference_date: date | None = None
) -> dict[str, object]:
    """List the dates of the period containing the reference date."""

    today = resolve_reference_date(reference_date)
    days = days_in_period(period, today)
    return {
        "period": period.value,
        "reference_date": format_date(today),
        "days": days,
    }
