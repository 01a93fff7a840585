#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run without external services:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v

Repository and API tests use an in-memory SQLite database created by
make_session_factory(). Scheduler tests drive ticks through run_once()
with a FakeClock instead of waiting on timers.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from database.models import Base


def make_engine():
    """In-memory SQLite shared across threads (one connection)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    return engine


def make_session_factory(engine=None) -> Callable[[], Session]:
    engine = engine or make_engine()
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


class FakeClock:
    """Callable clock for schedulers; advance() moves time forward."""

    def __init__(self, start: datetime = None):
        self.now = start or datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now
