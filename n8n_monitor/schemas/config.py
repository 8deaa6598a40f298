"""
Pydantic schemas for the stored n8n API configuration.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from .common import AbsoluteUrl, CamelModel, reject_null


# Fixed-length placeholder returned instead of the stored key.
API_KEY_MASK = "•" * 22


class ConfigurationIn(CamelModel):
    """Fields of a configuration save; unset fields keep their stored value."""

    api_url: Optional[AbsoluteUrl] = None
    api_key: Optional[str] = Field(default=None, min_length=1)
    refresh_interval: Optional[int] = Field(default=None, ge=0)
    notifications_enabled: Optional[bool] = None

    _no_nulls = field_validator(
        "api_url", "api_key", "refresh_interval", "notifications_enabled", mode="after"
    )(reject_null)

    @field_validator("api_key")
    @classmethod
    def _not_the_mask(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value.strip() == API_KEY_MASK:
            raise ValueError("apiKey must be the real key, not the masked placeholder")
        return value


class ConfigurationOut(CamelModel):
    id: int
    api_url: str
    api_key: str
    refresh_interval: int
    notifications_enabled: bool
