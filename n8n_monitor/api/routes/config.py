"""
n8n connection settings API.

The stored API key is write-only: responses always carry the mask.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...core.errors import NotFound
from ...models.api_config import ApiConfiguration
from ...schemas.config import API_KEY_MASK, ConfigurationIn, ConfigurationOut
from ...services import record_store


router = APIRouter(prefix="/api/n8n-config", tags=["config"])


def _to_config_out(config: ApiConfiguration) -> ConfigurationOut:
    return ConfigurationOut(
        id=config.id,
        api_url=config.api_url,
        api_key=API_KEY_MASK if config.api_key else "",
        refresh_interval=config.refresh_interval,
        notifications_enabled=config.notifications_enabled,
    )


@router.get("", response_model=ConfigurationOut)
def get_config(db: Session = Depends(get_db)) -> ConfigurationOut:
    config = record_store.get_configuration(db)
    if config is None:
        raise NotFound("No n8n configuration found")
    return _to_config_out(config)


@router.post("", response_model=ConfigurationOut, status_code=201)
def save_config(payload: ConfigurationIn, db: Session = Depends(get_db)) -> ConfigurationOut:
    config = record_store.save_configuration(db, payload.model_dump(exclude_unset=True))
    return _to_config_out(config)
