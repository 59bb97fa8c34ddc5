"""
Database initialization script.
"""
import logging

from zoo.core.config import settings
from zoo.core.logging_config import setup_logging
from zoo.db.session import init_db

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    logger.info(f"Initializing database at {settings.DATABASE_URL}...")
    init_db()
    logger.info("Database initialized successfully!")
