"""
Proxy endpoints for n8n executions.

Paging and filtering belong to n8n; the query parameters are forwarded as-is.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from ...services.n8n_client import N8nClient
from .workflows import get_n8n_client


router = APIRouter(prefix="/api/executions", tags=["executions"])

DEFAULT_EXECUTIONS_LIMIT = 20


@router.get("")
def list_executions(
    limit: int = Query(DEFAULT_EXECUTIONS_LIMIT),
    offset: int = Query(0),
    workflow_id: Optional[str] = Query(None, alias="workflowId"),
    client: N8nClient = Depends(get_n8n_client),
) -> Any:
    return client.list_executions(limit=limit, offset=offset, workflow_id=workflow_id)


@router.get("/{execution_id}")
def get_execution(execution_id: str, client: N8nClient = Depends(get_n8n_client)) -> Any:
    return client.get_execution(execution_id)
