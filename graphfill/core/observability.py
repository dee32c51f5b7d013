import logging

import sentry_sdk

from graphfill.settings import Settings


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Route graphfill log records to stderr at the requested level."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


def init_sentry(app_settings: Settings) -> None:
    """Initialize Sentry SDK when DSN is configured."""

    if not app_settings.sentry_dsn:
        return

    sentry_sdk.init(
        dsn=app_settings.sentry_dsn,
        environment=app_settings.environment,
        release=app_settings.release,
        send_default_pii=False,
    )


def report_exception(exc: BaseException) -> None:
    sentry_sdk.capture_exception(exc)
