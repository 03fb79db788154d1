import logging

import sentry_sdk

from visit_tracker.settings import Settings


def configure_logging(app_settings: Settings) -> None:
    """Configure root logging at the configured level."""

    logging.basicConfig(level=app_settings.log_level.upper())


def init_sentry(app_settings: Settings) -> None:
    """Initialize Sentry SDK when DSN is configured."""

    if not app_settings.sentry_dsn:
        return

    sentry_sdk.init(
        dsn=app_settings.sentry_dsn,
        environment=app_settings.environment,
        release=app_settings.release,
        traces_sample_rate=app_settings.sentry_traces_sample_rate,
        send_default_pii=False,
    )
