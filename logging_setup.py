import logging
from typing import Optional

from config import settings

LOGGER_NAME = "message-service"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None):
    """Configures the root logger. Falls back to MESSAGES_LOG_LEVEL when no level is given."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
    # uvicorn's access log duplicates the request line written by main.log_requests
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(LOGGER_NAME)
