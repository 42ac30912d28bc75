import logging
import sys

from linguaflow.config import settings

LOG_FORMAT = (
    '%(asctime)s - %(name)s - %(levelname)s - %(module)s '
    '- %(funcName)s - %(message)s'
)
# Request lines from the backend client are only interesting when debugging
HTTP_CLIENT_LOGGERS = ('httpx', 'httpcore')


def _resolve_level() -> int:
    if settings.debug:
        return logging.DEBUG
    level = logging.getLevelName(settings.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """
    Configures the root logger for the application.
    """
    log_level = _resolve_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(console_handler)

    if not settings.debug:
        for name in HTTP_CLIENT_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
