"""
Health endpoint for the n8n monitor backend.

Reports database reachability and whether n8n has been configured.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...models.api_config import CONFIG_ROW_ID, ApiConfiguration


router = APIRouter(prefix="/api/health", tags=["health"])

logger = logging.getLogger("health")


@router.get("")
def health(db: Session = Depends(get_db)) -> dict:
    database_ok = True
    configured = False
    try:
        db.execute(text("SELECT 1"))
        configured = db.get(ApiConfiguration, CONFIG_ROW_ID) is not None
    except SQLAlchemyError as exc:
        logger.warning("Health check database probe failed err=%s", exc)
        database_ok = False
    return {
        "status": "ok" if database_ok else "degraded",
        "database": database_ok,
        "configured": configured,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
    }
