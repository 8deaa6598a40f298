"""Pytest fixtures for the n8n monitor backend.

Each test gets its own in-memory SQLite database and a recording HTTP
session; nothing leaves the process.
"""

import os
import tempfile
from pathlib import Path

DB_PATH = Path(tempfile.gettempdir()) / "n8n_monitor_test.db"
if DB_PATH.exists():
    DB_PATH.unlink()

# Lightweight DB setup for the app's own engine; tests override get_db anyway.
os.environ.setdefault("DATABASE_URL", f"sqlite+pysqlite:///{DB_PATH}")
os.environ.setdefault("AUTO_CREATE_DB", "true")
os.environ.setdefault("AUTO_RUN_MIGRATIONS", "false")
os.environ.setdefault("APP_ENV", "dev")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from n8n_monitor.core.db import get_db
from n8n_monitor.core.http import get_http_session
from n8n_monitor.main import create_app
from n8n_monitor.models import Base

from fakes import RecordingSession


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def http_session():
    return RecordingSession()


@pytest.fixture
def client(session_factory, http_session):
    app = create_app()

    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_http_session] = lambda: http_session
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def configured(client):
    resp = client.post(
        "/api/n8n-config",
        json={
            "apiUrl": "https://n8n.example.test/api/v1/",
            "apiKey": "n8n-secret-key",
            "refreshInterval": 30,
            "notificationsEnabled": True,
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()
