from sqlalchemy import inspect
import logging

from constants import DatabaseConfig
from database import Base, engine as default_engine
import models  # noqa: F401  registers User on Base.metadata

logger = logging.getLogger(__name__)


def init_database(engine=None):
    """
    Create any missing tables.

    Existing tables are left untouched; schema migrations are owned by the
    storage driver, not by this service.
    """
    engine = engine or default_engine

    inspector = inspect(engine)
    existed = inspector.has_table(DatabaseConfig.USERS_TABLE)

    Base.metadata.create_all(bind=engine)

    if existed:
        logger.info(f"Database ready: '{DatabaseConfig.USERS_TABLE}' table already present")
    else:
        logger.info(f"✅ Created '{DatabaseConfig.USERS_TABLE}' table")
