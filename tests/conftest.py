"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as using a (SQLite) database (deselect with '-m \"not db\"')"
    )


@pytest.fixture(autouse=True)
def no_real_email(monkeypatch):
    """Never talk to a real SMTP server from tests."""
    for key in ('SMTP_SERVER', 'SMTP_PORT', 'SMTP_USERNAME', 'SMTP_PASSWORD', 'FROM_EMAIL'):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv('NOTIFICATION_DRY_RUN', raising=False)
    yield

