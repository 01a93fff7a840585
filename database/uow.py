import contextlib
import logging
from typing import Callable, ContextManager, Optional

from sqlalchemy.orm import Session

from database.repository import StoreRepository

logger = logging.getLogger(__name__)

StoreFactory = Callable[[], ContextManager[StoreRepository]]


@contextlib.contextmanager
def store_uow(session_factory: Optional[Callable[[], Session]] = None):
    """Per-unit-of-work transaction scope.

    Yields a StoreRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with store_uow() as repo:
            jobs = repo.jobs.get_active_posted_since(watermark)
            # perform operations...
        # commit happens automatically on successful exit
    """
    if session_factory is None:
        from database.database import SessionLocal
        session_factory = SessionLocal

    session = session_factory()
    try:
        repo = StoreRepository(session)
        yield repo
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def make_store_factory(session_factory: Callable[[], Session]) -> StoreFactory:
    """Bind store_uow to a specific session factory (tests, alternate engines)."""
    return lambda: store_uow(session_factory)
