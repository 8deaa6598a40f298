"""
Workflow alert rule endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...core.errors import NotFound
from ...models.workflow_alert import WorkflowAlert
from ...schemas.alert import WorkflowAlertCreate, WorkflowAlertOut, WorkflowAlertUpdate
from ...services import record_store


router = APIRouter(prefix="/api/workflow-alerts", tags=["workflow-alerts"])


@router.get("", response_model=list[WorkflowAlertOut])
def list_alerts(db: Session = Depends(get_db)) -> list[WorkflowAlert]:
    return record_store.list_alert_rules(db)


@router.post("", response_model=WorkflowAlertOut, status_code=201)
def create_alert(payload: WorkflowAlertCreate, db: Session = Depends(get_db)) -> WorkflowAlert:
    return record_store.create_alert_rule(db, payload.model_dump())


@router.get("/{alert_id}", response_model=WorkflowAlertOut)
def get_alert(alert_id: int, db: Session = Depends(get_db)) -> WorkflowAlert:
    alert = record_store.get_alert_rule(db, alert_id)
    if alert is None:
        raise NotFound("Workflow alert not found")
    return alert


@router.patch("/{alert_id}", response_model=WorkflowAlertOut)
def update_alert(alert_id: int, payload: WorkflowAlertUpdate, db: Session = Depends(get_db)) -> WorkflowAlert:
    return record_store.update_alert_rule(db, alert_id, payload.model_dump(exclude_unset=True))


@router.delete("/{alert_id}", status_code=204, response_class=Response)
def delete_alert(alert_id: int, db: Session = Depends(get_db)) -> Response:
    record_store.delete_alert_rule(db, alert_id)
    return Response(status_code=204)
