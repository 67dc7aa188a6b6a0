# tests/test_client.py

"""
Tests for the typed API client and its read cache.
"""

import pytest
from fastapi.testclient import TestClient

from client import ApiError, BuildingClient
from models import UserRole
from tests.conftest import DEFAULT_PASSWORD


class CountingSession:
    """Wraps TestClient and records every request made through it."""

    def __init__(self, test_client: TestClient):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url))
        return self.test_client.request(method, url, **kwargs)

    def count(self, method, url):
        return self.calls.count((method, url))


@pytest.fixture
def session(client: TestClient):
    return CountingSession(client)


@pytest.fixture
def api(session, building_admin):
    api = BuildingClient(session=session)
    api.login("manager", DEFAULT_PASSWORD)
    return api


def test_login_seeds_current_user(api: BuildingClient, session, building_admin):
    assert api.me().id == building_admin.id
    assert session.count("GET", "/api/auth/me") == 0


def test_reads_are_cached_until_a_mutation(api: BuildingClient, session):
    assert api.list_units() == []
    assert api.list_units() == []
    assert session.count("GET", "/api/units") == 1

    unit = api.create_unit(unit_number="101", floor=1)
    units = api.list_units()
    assert [u.id for u in units] == [unit.id]
    assert session.count("GET", "/api/units") == 2

    updated = api.update_unit(unit.id, status="inactive")
    assert updated.status.value == "inactive"
    assert api.list_units()[0].status.value == "inactive"
    assert session.count("GET", "/api/units") == 3


def test_payment_mutations_invalidate_balance(api: BuildingClient, session):
    unit = api.create_unit(unit_number="101", floor=1)
    assert api.unit_balance(unit.id).total_debt == 0

    payment = api.create_payment(unit_id=unit.id, amount=500000, period="1402-01")
    assert api.unit_balance(unit.id).total_debt == 500000
    assert [p.id for p in api.list_payments()] == [payment.id]

    result = api.pay_payment(payment.id)
    assert result.payment.status.value == "paid"
    assert api.unit_balance(unit.id).total_debt == 0
    assert api.list_payments()[0].status.value == "paid"
    assert len(api.payment_history(payment.id).entries) == 1


def test_messages_cache_and_refresh(api: BuildingClient, session):
    unit = api.create_unit(unit_number="101", floor=1)
    api.send_message(unit.id, "hello")
    assert [m.message for m in api.list_messages(unit.id)] == ["hello"]
    api.list_messages(unit.id)
    assert session.count("GET", f"/api/chats/{unit.id}/messages") == 1

    api.list_messages(unit.id, refresh=True)
    assert session.count("GET", f"/api/chats/{unit.id}/messages") == 2


def test_errors_raise_api_error(session, client, super_admin, building_admin):
    api = BuildingClient(session=session)
    with pytest.raises(ApiError) as exc_info:
        api.list_units()
    assert exc_info.value.status_code == 401

    with pytest.raises(ApiError) as exc_info:
        api.login("manager", "wrong")
    assert exc_info.value.status_code == 401

    api.login("root", DEFAULT_PASSWORD)
    with pytest.raises(ApiError) as exc_info:
        api.create_unit(unit_number="101", floor=1)
    assert exc_info.value.status_code == 403


def test_admin_and_resident_creation(session, super_admin):
    root = BuildingClient(session=session)
    root.login("root", DEFAULT_PASSWORD)
    admin = root.create_admin(name="Manager Two", username="manager2", password="pw-2")
    assert admin.role == UserRole.BUILDING_ADMIN

    manager = BuildingClient(session=session)
    manager.login("manager2", "pw-2")
    unit = manager.create_unit(unit_number="5", floor=2)
    resident = manager.create_resident(name="Sara", username="sara", password="pw-3", unit_id=unit.id)
    assert resident.unit_id == unit.id

    tenant = BuildingClient(session=session)
    tenant.login("sara", "pw-3")
    assert tenant.me().role == UserRole.RESIDENT
    assert [u.id for u in tenant.list_units()] == [unit.id]


def test_logout_forgets_token_and_cache(api: BuildingClient, session):
    api.list_units()
    assert api.token

    api.logout()

    assert api.token is None
    assert api._cache == {}
    with pytest.raises(ApiError) as exc_info:
        api.list_units()
    assert exc_info.value.status_code == 401
    assert session.count("GET", "/api/units") == 2
