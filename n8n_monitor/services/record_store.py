"""
Persistence for the dashboard's configuration singleton, workflow alert
rules and webhook test fixtures.

Every function takes the request's `Session`, commits before returning and
wraps database errors in `StorageFailure` after rolling back, so callers
never observe a partial write. Patches are plain dicts keyed by model
attribute name; merging is explicit per entity.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.errors import InvalidInput, NotFound, StorageFailure
from ..models.api_config import CONFIG_ROW_ID, ApiConfiguration
from ..models.webhook_test import WebhookTest
from ..models.workflow_alert import WorkflowAlert


logger = logging.getLogger("record_store")

DEFAULT_REFRESH_INTERVAL = 60
DEFAULT_NOTIFICATIONS_ENABLED = True
DEFAULT_ALERT_THRESHOLD = 1
DEFAULT_ALERT_ENABLED = True
DEFAULT_WEBHOOK_METHOD = "GET"

CONFIG_FIELDS = ("api_url", "api_key", "refresh_interval", "notifications_enabled")
CONFIG_REQUIRED_ON_CREATE = ("api_url", "api_key")
ALERT_FIELDS = ("workflow_id", "workflow_name", "alert_type", "threshold", "enabled", "message")
WEBHOOK_TEST_FIELDS = ("name", "url", "method", "headers", "body")

# Largest id an INTEGER primary key can hold on every supported backend.
MAX_ROW_ID = 2**31 - 1


def _now() -> datetime:
    return datetime.now(timezone.utc)


@contextmanager
def _guard(db: Session, action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageFailure(f"Failed to {action}") from exc


def _fetch(db: Session, model: type, row_id: int) -> Any:
    if not 1 <= row_id <= MAX_ROW_ID:
        return None
    return db.get(model, row_id)


def _merge(record: Any, patch: Dict[str, Any], fields: tuple[str, ...]) -> None:
    for key in fields:
        if key in patch:
            setattr(record, key, patch[key])


# Configuration


def get_configuration(db: Session) -> Optional[ApiConfiguration]:
    with _guard(db, "fetch n8n configuration"):
        return db.get(ApiConfiguration, CONFIG_ROW_ID)


def merge_configuration(config: ApiConfiguration, patch: Dict[str, Any]) -> None:
    _merge(config, patch, CONFIG_FIELDS)


def _new_configuration(patch: Dict[str, Any]) -> ApiConfiguration:
    missing = [key for key in CONFIG_REQUIRED_ON_CREATE if patch.get(key) is None]
    if missing:
        raise InvalidInput(
            [{"loc": ["body", key], "msg": "Field required", "type": "missing"} for key in missing]
        )
    config = ApiConfiguration(
        id=CONFIG_ROW_ID,
        refresh_interval=DEFAULT_REFRESH_INTERVAL,
        notifications_enabled=DEFAULT_NOTIFICATIONS_ENABLED,
    )
    merge_configuration(config, patch)
    return config


def save_configuration(db: Session, patch: Dict[str, Any]) -> ApiConfiguration:
    """Create the configuration or merge `patch` onto the stored one."""
    with _guard(db, "save n8n configuration"):
        config = db.get(ApiConfiguration, CONFIG_ROW_ID)
        if config is None:
            config = _new_configuration(patch)
            db.add(config)
            try:
                db.commit()
            except IntegrityError:
                # Another request created the row first; apply ours on top of it.
                db.rollback()
                config = db.get(ApiConfiguration, CONFIG_ROW_ID)
                if config is None:
                    raise
                merge_configuration(config, patch)
                db.commit()
            else:
                logger.info("Created n8n configuration")
        else:
            merge_configuration(config, patch)
            db.commit()
        db.refresh(config)
        return config


# Workflow alert rules


def list_alert_rules(db: Session) -> List[WorkflowAlert]:
    with _guard(db, "fetch workflow alerts"):
        return list(db.scalars(select(WorkflowAlert).order_by(WorkflowAlert.id.asc())))


def get_alert_rule(db: Session, alert_id: int) -> Optional[WorkflowAlert]:
    with _guard(db, "fetch workflow alert"):
        return _fetch(db, WorkflowAlert, alert_id)


def create_alert_rule(db: Session, data: Dict[str, Any]) -> WorkflowAlert:
    alert = WorkflowAlert(
        threshold=DEFAULT_ALERT_THRESHOLD,
        enabled=DEFAULT_ALERT_ENABLED,
        created_at=_now(),
    )
    _merge(alert, data, ALERT_FIELDS)
    with _guard(db, "create workflow alert"):
        db.add(alert)
        db.commit()
        db.refresh(alert)
    logger.info("Created workflow alert id=%s workflow_id=%s", alert.id, alert.workflow_id)
    return alert


def update_alert_rule(db: Session, alert_id: int, patch: Dict[str, Any]) -> WorkflowAlert:
    with _guard(db, "update workflow alert"):
        alert = _fetch(db, WorkflowAlert, alert_id)
        if alert is None:
            raise NotFound(f"Workflow alert with id {alert_id} not found")
        _merge(alert, patch, ALERT_FIELDS)
        db.commit()
        db.refresh(alert)
        return alert


def delete_alert_rule(db: Session, alert_id: int) -> None:
    with _guard(db, "delete workflow alert"):
        alert = _fetch(db, WorkflowAlert, alert_id)
        if alert is None:
            return
        db.delete(alert)
        db.commit()
    logger.info("Deleted workflow alert id=%s", alert_id)


# Webhook test fixtures


def list_webhook_tests(db: Session) -> List[WebhookTest]:
    with _guard(db, "fetch webhook tests"):
        return list(db.scalars(select(WebhookTest).order_by(WebhookTest.id.asc())))


def get_webhook_test(db: Session, webhook_test_id: int) -> Optional[WebhookTest]:
    with _guard(db, "fetch webhook test"):
        return _fetch(db, WebhookTest, webhook_test_id)


def create_webhook_test(db: Session, data: Dict[str, Any]) -> WebhookTest:
    webhook_test = WebhookTest(
        method=DEFAULT_WEBHOOK_METHOD,
        headers={},
        body=None,
        created_at=_now(),
    )
    _merge(webhook_test, data, WEBHOOK_TEST_FIELDS)
    with _guard(db, "create webhook test"):
        db.add(webhook_test)
        db.commit()
        db.refresh(webhook_test)
    logger.info("Created webhook test id=%s method=%s", webhook_test.id, webhook_test.method)
    return webhook_test


def update_webhook_test(db: Session, webhook_test_id: int, patch: Dict[str, Any]) -> WebhookTest:
    with _guard(db, "update webhook test"):
        webhook_test = _fetch(db, WebhookTest, webhook_test_id)
        if webhook_test is None:
            raise NotFound(f"Webhook test with id {webhook_test_id} not found")
        _merge(webhook_test, patch, WEBHOOK_TEST_FIELDS)
        db.commit()
        db.refresh(webhook_test)
        return webhook_test


def delete_webhook_test(db: Session, webhook_test_id: int) -> None:
    with _guard(db, "delete webhook test"):
        webhook_test = _fetch(db, WebhookTest, webhook_test_id)
        if webhook_test is None:
            return
        db.delete(webhook_test)
        db.commit()
    logger.info("Deleted webhook test id=%s", webhook_test_id)
