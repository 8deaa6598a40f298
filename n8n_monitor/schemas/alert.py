"""
Pydantic schemas for workflow alert rules.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .common import CamelModel, UtcDatetime, reject_null


AlertType = Literal["failure", "success", "partial_success"]


class WorkflowAlertBase(CamelModel):
    workflow_id: str = Field(min_length=1)
    workflow_name: str = Field(min_length=1)
    alert_type: AlertType
    threshold: int = Field(default=1, ge=1)
    enabled: bool = True
    message: str = Field(min_length=1)


class WorkflowAlertCreate(WorkflowAlertBase):
    pass


class WorkflowAlertUpdate(CamelModel):
    workflow_id: Optional[str] = Field(default=None, min_length=1)
    workflow_name: Optional[str] = Field(default=None, min_length=1)
    alert_type: Optional[AlertType] = None
    threshold: Optional[int] = Field(default=None, ge=1)
    enabled: Optional[bool] = None
    message: Optional[str] = Field(default=None, min_length=1)

    _no_nulls = field_validator(
        "workflow_id", "workflow_name", "alert_type", "threshold", "enabled", "message", mode="after"
    )(reject_null)


class WorkflowAlertOut(WorkflowAlertBase):
    id: int
    created_at: UtcDatetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
