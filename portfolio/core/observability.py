import logging

import sentry_sdk

from portfolio.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Set up root logging once for the application process."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # httpx logs full request lines at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


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
