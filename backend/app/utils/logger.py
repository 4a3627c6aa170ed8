import logging
import sys
from typing import Optional

from app.config import settings

def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Configure a named stdout logger once."""
    logger = logging.getLogger(name)

    if not logger.handlers:  # avoid duplicate handlers on re-import
        logger.setLevel(level or logging.getLevelName(settings.LOG_LEVEL.upper()))

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(formatter)

        logger.addHandler(console_handler)

    return logger

app_logger = setup_logger("app")
auth_logger = setup_logger("auth")
job_logger = setup_logger("jobs")
counter_logger = setup_logger("counters")
db_logger = setup_logger("database")
