from datetime import date

from pydantic import BaseModel
from pydantic import Field

from visit_tracker.services.streak_calculations import TimePeriod


class StatsRequest(BaseModel):
    """Visit history used to compute streak statistics."""

    visits: list[date] = Field(default_factory=list)
    today: date | None = None


class GridRequest(BaseModel):
    """Visit history and period used to compose a contribution grid."""

    visits: list[date] = Field(default_factory=list)
    period: TimePeriod = TimePeriod.WEEK
    today: date | None = None


class StatCard(BaseModel):
    key: str
    title: str
    value: int
    unit: str
    description: str


class StatsResponse(BaseModel):
    """Streak statistics as of the reference date."""

    reference_date: date
    current_streak: int
    longest_streak: int
    total_visits: int
    cards: list[StatCard]


class DayCell(BaseModel):
    """Single calendar cell of the contribution grid."""

    date: date
    is_visited: bool
    is_future: bool
    status: str
    tooltip: str


class GridResponse(BaseModel):
    """Week columns of 7 optional cells, Monday first."""

    period: TimePeriod
    reference_date: date
    title: str | None
    day_labels: list[str]
    columns: list[list[DayCell | None]]
    labels: list[str]


class PeriodDaysResponse(BaseModel):
    period: TimePeriod
    reference_date: date
    days: list[date]
