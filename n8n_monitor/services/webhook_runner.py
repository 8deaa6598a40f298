"""
Replays stored webhook test fixtures.

Whatever status the target answers with is reported back as the result;
only a request that gets no response at all is a failure. Results are
returned to the caller and never stored.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import requests

from ..core.config import settings
from ..core.errors import InvalidBody, UpstreamFailure
from ..models.webhook_test import WebhookTest
from ..schemas.webhook_test import WebhookTestResult
from .n8n_client import response_payload


logger = logging.getLogger("webhook_runner")


def _parse_body(body: Optional[str]):
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError as exc:
        logger.warning("Webhook test body is not valid JSON err=%s", exc)
        raise InvalidBody(f"Body is not valid JSON: {exc}") from exc


def execute_webhook_test(
    webhook_test: WebhookTest,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> WebhookTestResult:
    payload = _parse_body(webhook_test.body)
    session = session or requests.Session()
    timeout = timeout if timeout is not None else settings.webhook_test_timeout_sec
    request_kwargs = {}
    if payload is not None:
        request_kwargs["json"] = payload
    try:
        response = session.request(
            webhook_test.method,
            webhook_test.url,
            headers=dict(webhook_test.headers or {}),
            timeout=timeout,
            **request_kwargs,
        )
    except requests.RequestException as exc:
        logger.warning("Webhook test id=%s request failed err=%s", webhook_test.id, exc)
        raise UpstreamFailure("Failed to execute webhook test", detail=str(exc)) from exc

    logger.info(
        "Webhook test id=%s executed method=%s status=%s",
        webhook_test.id,
        webhook_test.method,
        response.status_code,
    )
    return WebhookTestResult(
        status=response.status_code,
        status_text=response.reason or "",
        headers={str(key).lower(): str(value) for key, value in response.headers.items()},
        data=response_payload(response),
    )
