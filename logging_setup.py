import logging
from config import settings

# httpx logs every request URL at INFO, and the provider key travels in the query string.
QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging():
    """Configures the root logger from the settings and quiets the HTTP client loggers."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
