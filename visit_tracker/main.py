from fastapi import FastAPI

from visit_tracker.api.routes.streaks import router
from visit_tracker.core.middleware import GridRateLimitMiddleware
from visit_tracker.core.observability import configure_logging
from visit_tracker.core.observability import init_sentry
from visit_tracker.settings import APP_NAME
from visit_tracker.settings import APP_VERSION
from visit_tracker.settings import Settings


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with logging, Sentry and rate limiting."""

    app_settings = app_settings or Settings()
    configure_logging(app_settings)
    init_sentry(app_settings)

    application = FastAPI(title=APP_NAME, version=APP_VERSION)
    application.add_middleware(
        GridRateLimitMiddleware,
        requests_per_window=app_settings.rate_limit_per_minute,
        window_seconds=app_settings.rate_limit_window_seconds,
        trust_forwarded_for=app_settings.trust_forwarded_for,
    )
    application.include_router(router)
    return application


app = create_app()
