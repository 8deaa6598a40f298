"""
SQLAlchemy model base class for the n8n monitor backend.

This package defines ORM models for the dashboard's n8n connection
settings, workflow alert rules and webhook test fixtures. All models
should inherit from the declarative `Base` defined here.
"""

from __future__ import annotations

from sqlalchemy import JSON
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.dialects.postgresql import JSONB


@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(type_, compiler, **kw):
    return compiler.process(JSON(), **kw)


from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


from .api_config import ApiConfiguration  # noqa: E402,F401
from .workflow_alert import WorkflowAlert  # noqa: E402,F401
from .webhook_test import WebhookTest  # noqa: E402,F401

__all__ = [
    "Base",
    "ApiConfiguration",
    "WorkflowAlert",
    "WebhookTest",
]
