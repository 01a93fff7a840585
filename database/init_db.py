import logging
from tenacity import retry, stop_after_attempt, wait_fixed
from sqlalchemy.engine import Engine

from database.models import Base

logger = logging.getLogger(__name__)


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2))
def init_db(bind: Engine = None):
    """Create tables, retrying while the database container comes up."""
    if bind is None:
        from database.database import engine
        bind = engine

    logger.info("Initializing database...")
    try:
        Base.metadata.create_all(bind=bind)
        logger.info("Tables created or verified.")
    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
