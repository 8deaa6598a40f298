"""
Database session management for the n8n monitor backend.

Uses SQLAlchemy 2.x style `Session` and declarative models. Provides a
session factory and dependency helper for use with FastAPI.
"""

from __future__ import annotations

import os
from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from .config import settings


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except Exception:
        return default


def _engine_kwargs(url: str) -> Dict[str, Any]:
    if url.startswith("sqlite"):
        # Handlers run on the FastAPI worker pool, not the thread that opened the connection.
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_size": _env_int("DB_POOL_SIZE", 5),
        "max_overflow": _env_int("DB_MAX_OVERFLOW", 10),
        "pool_recycle": _env_int("DB_POOL_RECYCLE_SEC", 1800),
        "pool_timeout": _env_int("DB_POOL_TIMEOUT_SEC", 30),
    }


# Create SQLAlchemy engine
engine = create_engine(
    settings.database_url,
    echo=False,
    future=True,
    **_engine_kwargs(settings.database_url),
)

# Create a configured session factory
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


def get_db():
    """Yield a database session for FastAPI dependencies."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

