# tests/test_auth.py

"""
Tests for login, the current-user endpoint and the access control layer.
"""

from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

import main
from database import get_session_context
from models import UserRole
from services import user_service
from services.user_service import UserService
from tests.conftest import DEFAULT_PASSWORD
from utils.security import decode_access_token


def test_login_success(client: TestClient, building_admin):
    response = client.post("/api/auth/login", json={"username": "manager", "password": DEFAULT_PASSWORD})

    assert response.status_code == 200
    data = response.json()
    assert decode_access_token(data["token"]).id == building_admin.id
    assert data["user"]["username"] == "manager"
    assert data["user"]["role"] == "building_admin"
    assert "password" not in data["user"]


def test_login_wrong_password(client: TestClient, building_admin):
    response = client.post("/api/auth/login", json={"username": "manager", "password": "nope"})
    assert response.status_code == 401


def test_login_unknown_user(client: TestClient):
    response = client.post("/api/auth/login", json={"username": "ghost", "password": "nope"})
    assert response.status_code == 401


def test_unknown_username_still_runs_a_password_check(monkeypatch):
    calls = []
    monkeypatch.setattr(user_service, "dummy_verify_password", lambda: calls.append("dummy"))

    with get_session_context() as db:
        assert UserService.authenticate(db, "ghost", "nope") is None

    assert calls == ["dummy"]


def test_login_invalid_body(client: TestClient):
    response = client.post("/api/auth/login", json={"username": "manager"})
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid input"}


def test_me_returns_current_user(client: TestClient, building_admin, admin_headers):
    response = client.get("/api/auth/me", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["id"] == building_admin.id
    assert response.json()["name"] == "Manager"


def test_missing_token_is_401_without_body(client: TestClient):
    response = client.get("/api/units")
    assert response.status_code == 401
    assert response.content == b""


def test_non_bearer_header_is_401(client: TestClient):
    response = client.get("/api/units", headers={"Authorization": "Basic dXNlcjpwdw=="})
    assert response.status_code == 401


def test_invalid_token_is_403_without_body(client: TestClient):
    response = client.get("/api/units", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 403
    assert response.content == b""


def test_disallowed_role_is_403(client: TestClient, super_admin_headers):
    response = client.post(
        "/api/units",
        json={"unitNumber": "101", "floor": 1, "status": "active"},
        headers=super_admin_headers,
    )
    assert response.status_code == 403


def test_allowed_role_proceeds(client: TestClient, admin_headers):
    response = client.post(
        "/api/units",
        json={"unitNumber": "101", "floor": 1, "status": "active"},
        headers=admin_headers,
    )
    assert response.status_code == 201


def test_authentication_runs_before_role_check(client: TestClient):
    # No token on a role-gated route is still 401, not 403
    response = client.post("/api/admins/create", json={})
    assert response.status_code == 401


def test_concurrent_logins_each_get_a_valid_token(client: TestClient, building_admin):
    def login(password):
        return client.post("/api/auth/login", json={"username": "manager", "password": password})

    with ThreadPoolExecutor(max_workers=4) as pool:
        good = list(pool.map(login, [DEFAULT_PASSWORD, DEFAULT_PASSWORD]))
        bad = list(pool.map(login, ["wrong", "wrong"]))

    assert [r.status_code for r in good] == [200, 200]
    tokens = [r.json()["token"] for r in good]
    assert tokens[0] != tokens[1]
    for token in tokens:
        identity = decode_access_token(token)
        assert identity.id == building_admin.id
        assert identity.role == UserRole.BUILDING_ADMIN
    assert [r.status_code for r in bad] == [401, 401]


def test_unknown_route_returns_json_404(client: TestClient):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "connected"}


def test_health_reports_unreachable_database(client: TestClient, monkeypatch):
    monkeypatch.setattr(main, "check_connection", lambda: False)
    response = client.get("/health")
    assert response.status_code == 503
    assert response.json() == {"status": "degraded", "database": "unavailable"}
