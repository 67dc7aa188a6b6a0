# tests/test_units.py

"""
Tests for unit endpoints.
"""

from fastapi.testclient import TestClient

from models import UserRole


def test_create_then_list_units(client: TestClient, admin_headers):
    created = client.post(
        "/api/units",
        json={"unitNumber": "101", "floor": 1, "status": "active"},
        headers=admin_headers,
    )
    assert created.status_code == 201

    response = client.get("/api/units", headers=admin_headers)
    assert response.status_code == 200
    units = response.json()
    assert len(units) == 1
    unit = units[0]
    assert unit["unitNumber"] == "101"
    assert unit["floor"] == 1
    assert unit["status"] == "active"
    assert unit["residentId"] is None
    assert isinstance(unit["id"], int)
    assert unit["createdAt"]


def test_status_defaults_to_active(client: TestClient, admin_headers):
    response = client.post("/api/units", json={"unitNumber": "7", "floor": 0}, headers=admin_headers)
    assert response.status_code == 201
    assert response.json()["status"] == "active"


def test_create_unit_validation(client: TestClient, admin_headers):
    bad_bodies = [
        {"floor": 1},
        {"unitNumber": "101", "floor": "first"},
        {"unitNumber": "101", "floor": "1"},
        {"unitNumber": "101", "floor": 1.5},
        {"unitNumber": "101", "floor": 1, "residentId": "3"},
        {"unitNumber": "101", "floor": 1, "status": "demolished"},
    ]
    for body in bad_bodies:
        response = client.post("/api/units", json=body, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid input"}


def test_partial_update(client: TestClient, admin_headers, make_unit):
    unit = make_unit("101", floor=1)

    response = client.patch(f"/api/units/{unit.id}", json={"status": "inactive"}, headers=admin_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "inactive"
    assert data["unitNumber"] == "101"
    assert data["floor"] == 1


def test_update_rejects_null_required_field(client: TestClient, admin_headers, make_unit):
    unit = make_unit()
    response = client.patch(f"/api/units/{unit.id}", json={"floor": None}, headers=admin_headers)
    assert response.status_code == 400


def test_update_unknown_unit(client: TestClient, admin_headers):
    response = client.patch("/api/units/999", json={"floor": 2}, headers=admin_headers)
    assert response.status_code == 404


def test_resident_cannot_create_or_update(client: TestClient, make_unit, make_user, auth_headers):
    unit = make_unit()
    resident = make_user("sara", UserRole.RESIDENT, unit_id=unit.id)
    headers = auth_headers(resident)

    assert client.post("/api/units", json={"unitNumber": "9", "floor": 9}, headers=headers).status_code == 403
    assert client.patch(f"/api/units/{unit.id}", json={"floor": 2}, headers=headers).status_code == 403


def test_resident_only_lists_own_unit(client: TestClient, make_unit, make_user, auth_headers):
    own = make_unit("101")
    make_unit("102")
    resident = make_user("sara", UserRole.RESIDENT, unit_id=own.id)

    response = client.get("/api/units", headers=auth_headers(resident))

    assert response.status_code == 200
    assert [u["id"] for u in response.json()] == [own.id]


def test_balance_of_unknown_unit(client: TestClient, admin_headers):
    assert client.get("/api/units/999/balance", headers=admin_headers).status_code == 404
