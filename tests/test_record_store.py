import pytest
from sqlalchemy.exc import OperationalError

from n8n_monitor.core.errors import InvalidInput, NotFound, StorageFailure
from n8n_monitor.models import ApiConfiguration, WorkflowAlert
from n8n_monitor.services import record_store


def _alert_data(**overrides):
    data = {
        "workflow_id": "wf-1",
        "workflow_name": "Nightly sync",
        "alert_type": "failure",
        "threshold": 2,
        "enabled": True,
        "message": "Nightly sync failed",
    }
    data.update(overrides)
    return data


def test_get_configuration_absent(db_session):
    assert record_store.get_configuration(db_session) is None


def test_save_configuration_creates_with_defaults(db_session):
    config = record_store.save_configuration(
        db_session, {"api_url": "https://n8n.example.test/api/v1", "api_key": "secret"}
    )
    assert config.id == 1
    assert config.refresh_interval == record_store.DEFAULT_REFRESH_INTERVAL == 60
    assert config.notifications_enabled is True


def test_save_configuration_requires_url_and_key_on_create(db_session):
    with pytest.raises(InvalidInput) as excinfo:
        record_store.save_configuration(db_session, {"refresh_interval": 10})
    locs = {tuple(err["loc"]) for err in excinfo.value.errors}
    assert locs == {("body", "api_url"), ("body", "api_key")}
    assert record_store.get_configuration(db_session) is None


def test_save_configuration_merges_patch(db_session):
    record_store.save_configuration(
        db_session,
        {
            "api_url": "https://n8n.example.test/api/v1",
            "api_key": "secret",
            "refresh_interval": 30,
            "notifications_enabled": False,
        },
    )
    config = record_store.save_configuration(db_session, {"refresh_interval": 0})
    assert config.refresh_interval == 0
    assert config.api_url == "https://n8n.example.test/api/v1"
    assert config.api_key == "secret"
    assert config.notifications_enabled is False


def test_save_configuration_idempotent_singleton(db_session):
    payload = {"api_url": "https://a.test/api/v1", "api_key": "k1", "refresh_interval": 15}
    first = record_store.save_configuration(db_session, payload)
    first_values = (first.id, first.api_url, first.api_key, first.refresh_interval, first.notifications_enabled)
    second = record_store.save_configuration(db_session, payload)
    second_values = (second.id, second.api_url, second.api_key, second.refresh_interval, second.notifications_enabled)
    assert first_values == second_values
    record_store.save_configuration(db_session, {"api_url": "https://b.test/api/v1"})
    assert db_session.query(ApiConfiguration).count() == 1


def test_create_then_get_alert_rule(db_session):
    data = _alert_data()
    created = record_store.create_alert_rule(db_session, data)
    fetched = record_store.get_alert_rule(db_session, created.id)
    assert fetched is not None
    assert fetched.id == created.id
    assert fetched.created_at is not None
    for key, value in data.items():
        assert getattr(fetched, key) == value


def test_create_alert_rule_applies_defaults(db_session):
    data = _alert_data()
    del data["threshold"]
    del data["enabled"]
    alert = record_store.create_alert_rule(db_session, data)
    assert alert.threshold == record_store.DEFAULT_ALERT_THRESHOLD == 1
    assert alert.enabled is True


def test_alert_ids_never_reused(db_session):
    first = record_store.create_alert_rule(db_session, _alert_data())
    second = record_store.create_alert_rule(db_session, _alert_data(workflow_id="wf-2"))
    record_store.delete_alert_rule(db_session, second.id)
    third = record_store.create_alert_rule(db_session, _alert_data(workflow_id="wf-3"))
    assert first.id < second.id < third.id


def test_delete_missing_alert_rule_is_noop(db_session):
    record_store.create_alert_rule(db_session, _alert_data())
    before = [(a.id, a.workflow_id) for a in record_store.list_alert_rules(db_session)]
    record_store.delete_alert_rule(db_session, 9999)
    after = [(a.id, a.workflow_id) for a in record_store.list_alert_rules(db_session)]
    assert before == after


def test_update_missing_alert_rule_raises(db_session):
    record_store.create_alert_rule(db_session, _alert_data())
    before = [(a.id, a.message) for a in record_store.list_alert_rules(db_session)]
    with pytest.raises(NotFound):
        record_store.update_alert_rule(db_session, 9999, {"message": "changed"})
    after = [(a.id, a.message) for a in record_store.list_alert_rules(db_session)]
    assert before == after


def test_update_alert_rule_patches_given_fields(db_session):
    alert = record_store.create_alert_rule(db_session, _alert_data())
    created_at = alert.created_at
    updated = record_store.update_alert_rule(db_session, alert.id, {"enabled": False, "threshold": 5})
    assert updated.enabled is False
    assert updated.threshold == 5
    assert updated.message == "Nightly sync failed"
    assert updated.created_at == created_at


def test_create_webhook_test_defaults(db_session):
    webhook_test = record_store.create_webhook_test(
        db_session, {"name": "Ping", "url": "https://hooks.example.test/ping"}
    )
    assert webhook_test.method == "GET"
    assert webhook_test.headers == {}
    assert webhook_test.body is None
    assert webhook_test.created_at is not None


def test_update_and_delete_webhook_test(db_session):
    webhook_test = record_store.create_webhook_test(
        db_session, {"name": "Ping", "url": "https://hooks.example.test/ping"}
    )
    updated = record_store.update_webhook_test(
        db_session,
        webhook_test.id,
        {"method": "POST", "headers": {"X-Trace": "1"}, "body": '{"a": 1}'},
    )
    assert updated.method == "POST"
    assert updated.headers == {"X-Trace": "1"}
    assert updated.body == '{"a": 1}'
    assert updated.name == "Ping"

    record_store.delete_webhook_test(db_session, webhook_test.id)
    assert record_store.get_webhook_test(db_session, webhook_test.id) is None
    with pytest.raises(NotFound):
        record_store.update_webhook_test(db_session, webhook_test.id, {"name": "gone"})


def test_storage_error_is_wrapped_and_rolled_back(db_session, monkeypatch):
    def _boom():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_session, "commit", _boom)
    with pytest.raises(StorageFailure):
        record_store.create_alert_rule(db_session, _alert_data())
    monkeypatch.undo()
    assert db_session.query(WorkflowAlert).count() == 0


def test_out_of_range_ids_are_absent(db_session):
    huge = 2**70
    assert record_store.get_alert_rule(db_session, huge) is None
    assert record_store.get_webhook_test(db_session, huge) is None
    record_store.delete_alert_rule(db_session, huge)
    record_store.delete_webhook_test(db_session, -1)
    with pytest.raises(NotFound):
        record_store.update_alert_rule(db_session, huge, {"message": "changed"})
    with pytest.raises(NotFound):
        record_store.update_webhook_test(db_session, 0, {"name": "changed"})
