from datetime import date

from fastapi import APIRouter
from fastapi import Query

from visit_tracker.api.schemas.streaks import GridRequest
from visit_tracker.api.schemas.streaks import GridResponse
from visit_tracker.api.schemas.streaks import PeriodDaysResponse
from visit_tracker.api.schemas.streaks import StatsRequest
from visit_tracker.api.schemas.streaks import StatsResponse
from visit_tracker.services.streak_calculations import TimePeriod
from visit_tracker.services.streak_calculations import format_date
from visit_tracker.services.streak_service import build_grid_payload
from visit_tracker.services.streak_service import build_period_days_payload
from visit_tracker.services.streak_service import build_stats_payload
from visit_tracker.settings import APP_NAME
from visit_tracker.settings import APP_VERSION


router = APIRouter()


def visit_keys(visits: list[date]) -> list[str]:
    return [format_date(visit) for visit in visits]


@router.get("/")
async def root() -> dict[str, str]:
    """Return the service name and version."""

    return {"service": APP_NAME, "version": APP_VERSION}


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return liveness probe response for health checks."""

    return {"status": "ok"}


@router.post("/streaks/stats", response_model=StatsResponse)
def get_streak_stats(payload: StatsRequest) -> dict[str, object]:
    """Return current streak, longest streak and total visits."""

    return build_stats_payload(
        visit_keys(payload.visits), reference_date=payload.today
    )


@router.post("/streaks/grid", response_model=GridResponse)
def get_streak_grid(payload: GridRequest) -> dict[str, object]:
    """Return the contribution grid for the requested period."""

    return build_grid_payload(
        visit_keys(payload.visits),
        payload.period,
        reference_date=payload.today,
    )


@router.get("/streaks/periods/{period}/days", response_model=PeriodDaysResponse)
def get_period_days(
    period: TimePeriod,
    today: date | None = Query(default=None),
) -> dict[str, object]:
    """Return the dates of the period containing the reference date."""

    return build_period_days_payload(period, reference_date=today)
