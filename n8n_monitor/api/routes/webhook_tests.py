"""
Webhook test fixture endpoints, including on-demand execution.
"""

from __future__ import annotations

import requests
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...core.errors import NotFound
from ...core.http import get_http_session
from ...models.webhook_test import WebhookTest
from ...schemas.webhook_test import WebhookTestCreate, WebhookTestOut, WebhookTestResult, WebhookTestUpdate
from ...services import record_store
from ...services.webhook_runner import execute_webhook_test


router = APIRouter(prefix="/api/webhook-tests", tags=["webhook-tests"])


def _get_or_404(db: Session, webhook_test_id: int) -> WebhookTest:
    webhook_test = record_store.get_webhook_test(db, webhook_test_id)
    if webhook_test is None:
        raise NotFound("Webhook test not found")
    return webhook_test


@router.get("", response_model=list[WebhookTestOut])
def list_webhook_tests(db: Session = Depends(get_db)) -> list[WebhookTest]:
    return record_store.list_webhook_tests(db)


@router.post("", response_model=WebhookTestOut, status_code=201)
def create_webhook_test(payload: WebhookTestCreate, db: Session = Depends(get_db)) -> WebhookTest:
    return record_store.create_webhook_test(db, payload.model_dump())


@router.get("/{webhook_test_id}", response_model=WebhookTestOut)
def get_webhook_test(webhook_test_id: int, db: Session = Depends(get_db)) -> WebhookTest:
    return _get_or_404(db, webhook_test_id)


@router.patch("/{webhook_test_id}", response_model=WebhookTestOut)
def update_webhook_test(
    webhook_test_id: int,
    payload: WebhookTestUpdate,
    db: Session = Depends(get_db),
) -> WebhookTest:
    return record_store.update_webhook_test(db, webhook_test_id, payload.model_dump(exclude_unset=True))


@router.delete("/{webhook_test_id}", status_code=204, response_class=Response)
def delete_webhook_test(webhook_test_id: int, db: Session = Depends(get_db)) -> Response:
    record_store.delete_webhook_test(db, webhook_test_id)
    return Response(status_code=204)


@router.post("/{webhook_test_id}/execute", response_model=WebhookTestResult)
def run_webhook_test(
    webhook_test_id: int,
    db: Session = Depends(get_db),
    session: requests.Session = Depends(get_http_session),
) -> WebhookTestResult:
    webhook_test = _get_or_404(db, webhook_test_id)
    return execute_webhook_test(webhook_test, session=session)
