from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.core.config import settings
from tests.helpers.asserts import api_call, envelope_data, error_message

SECRET = "test-secret-key"


@pytest.fixture
def signed_tokens(monkeypatch):
    monkeypatch.setattr(settings, "SECRET_KEY", SECRET)

    def _token(subject, secret=SECRET):
        claims = {"sub": subject, "exp": datetime.utcnow() + timedelta(minutes=5)}
        return jwt.encode(claims, secret, algorithm="HS256")
    return _token


@pytest.mark.parametrize("method,path", [
    ("GET", "/api/summary/dashboard"),
    ("GET", "/api/classes/"),
    ("GET", "/api/budget/summary"),
    ("GET", "/api/planner/"),
    ("GET", "/api/quiz/results/performance"),
    ("POST", "/api/summary/mood-track"),
])
def test_requests_without_identity_are_rejected(client: TestClient, method, path):
    body = api_call(client, method, path, json={}, expected_status=401)
    assert body["error"]["code"] == "UNAUTHORIZED"


def test_bearer_token_identifies_user(client: TestClient, signed_tokens, budget_factory):
    budget_factory("token-user", type="income", amount=42, category="Job")
    headers = {"Authorization": f"Bearer {signed_tokens('token-user')}"}

    summary = envelope_data(api_call(client, "GET", "/api/budget/summary", headers=headers))
    assert summary["total_income"] == 42


def test_token_signed_with_other_key_is_rejected(client: TestClient, signed_tokens):
    headers = {"Authorization": f"Bearer {signed_tokens('token-user', secret='wrong')}"}
    body = api_call(client, "GET", "/api/summary/dashboard", headers=headers, expected_status=401)
    assert error_message(body) == "Invalid token"


def test_dev_header_can_be_disabled(client: TestClient, monkeypatch):
    monkeypatch.setattr(settings, "ALLOW_DEV_USER_HEADER", False)
    api_call(client, "GET", "/api/classes/", headers={"X-User-Id": "someone"}, expected_status=401)


def test_liveness(client: TestClient):
    body = api_call(client, "GET", "/healthz")
    assert body["ok"] is True
    assert isinstance(body["ts"], int)


def test_cache_health(client: TestClient, auth_headers):
    client.get("/api/classes/", headers=auth_headers)
    stats = envelope_data(api_call(client, "GET", "/cache/health", headers=auth_headers))

    assert stats["healthy"] is True
    assert stats["backend"] == "Memory"
    assert stats["entries"] >= 1
    assert "keys" not in stats


def test_unhandled_error_is_wrapped(client: TestClient, auth_headers, monkeypatch):
    from app.services.class_schedule import class_schedule_service

    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(class_schedule_service, "list_classes", explode)
    with TestClient(client.app, raise_server_exceptions=False) as quiet_client:
        response = quiet_client.get("/api/classes/", headers=auth_headers)

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"
