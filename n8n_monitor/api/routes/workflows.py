"""
Proxy endpoints for n8n workflows.

Responses are n8n's own payloads, passed through unchanged.
"""

from __future__ import annotations

from typing import Any

import requests
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...core.http import get_http_session
from ...services import record_store
from ...services.n8n_client import N8nClient


router = APIRouter(prefix="/api/workflows", tags=["workflows"])


def get_n8n_client(
    db: Session = Depends(get_db),
    session: requests.Session = Depends(get_http_session),
) -> N8nClient:
    return N8nClient.from_configuration(record_store.get_configuration(db), session=session)


@router.get("")
def list_workflows(client: N8nClient = Depends(get_n8n_client)) -> Any:
    return client.list_workflows()


@router.get("/{workflow_id}")
def get_workflow(workflow_id: str, client: N8nClient = Depends(get_n8n_client)) -> Any:
    return client.get_workflow(workflow_id)


@router.post("/{workflow_id}/activate")
def activate_workflow(workflow_id: str, client: N8nClient = Depends(get_n8n_client)) -> Any:
    return client.activate_workflow(workflow_id)


@router.post("/{workflow_id}/deactivate")
def deactivate_workflow(workflow_id: str, client: N8nClient = Depends(get_n8n_client)) -> Any:
    return client.deactivate_workflow(workflow_id)


@router.post("/{workflow_id}/execute")
def execute_workflow(workflow_id: str, client: N8nClient = Depends(get_n8n_client)) -> Any:
    return client.execute_workflow(workflow_id)
