"""
Shared pydantic building blocks for the dashboard API schemas.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel


_URL_ADAPTER = TypeAdapter(AnyUrl)


def _check_absolute_url(value: str) -> str:
    value = value.strip()
    try:
        parsed = _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise ValueError("Please enter a valid URL")
    if not parsed.host:
        raise ValueError("URL must include a host")
    # Keep the caller's spelling; AnyUrl would normalise it.
    return value


AbsoluteUrl = Annotated[str, AfterValidator(_check_absolute_url)]


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; the store always writes UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """Accepts and emits camelCase field names while keeping snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def reject_null(value, info):
    if value is None:
        raise ValueError(f"{info.field_name} may not be null")
    return value
