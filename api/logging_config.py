"""
Centralized logging configuration.

Entry points (manage.py, main.py) call configure_logging() once.
Library modules only use logging.getLogger(__name__).
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Suppress verbose third-party library output
_SUPPRESSED_LOGGERS = [
    'urllib3',
    'requests',
]


def configure_logging(level: str = "INFO") -> None:
    """Set root log level and format"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    for logger_name in _SUPPRESSED_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
