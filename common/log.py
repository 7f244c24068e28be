"""Logging setup shared by the site's services."""

import logging

import common.settings

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class HealthCheckFilter(logging.Filter):
    """Filter out health check requests from uvicorn access logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return False to suppress health check log entries."""
        return '/health' not in record.getMessage()


def configure_logging(level: str | None = None) -> None:
    """Configure application logging and silence health checks in access logs.

    Application loggers (``aerial.*``) propagate to the root logger, which gets
    a stream handler at ``LOG_LEVEL`` unless one is already installed. Safe to
    call more than once.
    """
    logging.basicConfig(level=level or common.settings.LOG_LEVEL, format=LOG_FORMAT)
    access_logger = logging.getLogger('uvicorn.access')
    if not any(isinstance(f, HealthCheckFilter) for f in access_logger.filters):
        access_logger.addFilter(HealthCheckFilter())
