#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator, Optional
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from core.app_context import AppContext
from .config import get_config


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, url: str):
        self.engine = create_engine(
            url,
            pool_pre_ping=True,  # Verify connections before using
            pool_size=10,
            max_overflow=20
        )
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def get_session(self) -> Generator[Session, None, None]:
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


_db_manager: Optional[DatabaseManager] = None


def get_db_manager() -> DatabaseManager:
    """Create the engine on first use so importing the app needs no database."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(get_config().database.url)
    return _db_manager


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...
    """
    yield from get_db_manager().get_session()


def get_app_context(request: Request) -> AppContext:
    """The AppContext built during application startup."""
    return request.app.state.context
