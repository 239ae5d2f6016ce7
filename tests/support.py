"""Shared helpers for the API tests: an in-memory SQLite store injected into the app."""

from typing import Optional

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.main import create_app


def make_engine():
    return create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


def make_client(config: Optional[Settings] = None, engine=None) -> TestClient:
    """Return an un-entered ``TestClient``; use it as a context manager to run startup."""
    app = create_app(engine=engine or make_engine(), config=config or Settings())
    return TestClient(app)
