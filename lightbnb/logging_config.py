"""
Logging setup shared by scripts and services embedding the data access layer.
"""

import logging
from typing import Optional

from lightbnb.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for the process.
    
    Args:
        level: Log level name, defaults to the LOG_LEVEL setting
    """
    logging.basicConfig(level=level or settings.log_level, format=LOG_FORMAT)
    
    # SQLAlchemy echoes statements through its own logger when debug is enabled
    if settings.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
