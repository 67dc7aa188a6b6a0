# tests/test_chats.py

"""
Tests for unit chat messages and their access rules.
"""

from fastapi.testclient import TestClient

from models import UserRole


def test_message_is_listed_only_for_its_unit(client: TestClient, make_unit, make_user, auth_headers, admin_headers):
    unit = make_unit("105")
    other = make_unit("106")
    resident = make_user("sara", UserRole.RESIDENT, unit_id=unit.id)

    sent = client.post(
        f"/api/chats/{unit.id}/messages",
        json={"unitId": unit.id, "message": "hello", "senderType": "resident"},
        headers=auth_headers(resident),
    )
    assert sent.status_code == 201
    assert sent.json()["isRead"] is False

    listed = client.get(f"/api/chats/{unit.id}/messages", headers=admin_headers).json()
    assert [(m["message"], m["senderType"], m["unitId"]) for m in listed] == [("hello", "resident", unit.id)]

    assert client.get(f"/api/chats/{other.id}/messages", headers=admin_headers).json() == []


def test_sender_type_is_derived_from_role(client: TestClient, make_unit, admin_headers):
    unit = make_unit()
    response = client.post(f"/api/chats/{unit.id}/messages", json={"message": "rent is due"}, headers=admin_headers)

    assert response.status_code == 201
    assert response.json()["senderType"] == "admin"


def test_conversation_keeps_order(client: TestClient, make_unit, make_user, auth_headers, admin_headers):
    unit = make_unit()
    resident_headers = auth_headers(make_user("sara", UserRole.RESIDENT, unit_id=unit.id))
    client.post(f"/api/chats/{unit.id}/messages", json={"message": "first"}, headers=resident_headers)
    client.post(f"/api/chats/{unit.id}/messages", json={"message": "second"}, headers=admin_headers)

    listed = client.get(f"/api/chats/{unit.id}/messages", headers=resident_headers).json()
    assert [m["message"] for m in listed] == ["first", "second"]


def test_resident_cannot_read_or_write_other_units(client: TestClient, make_unit, make_user, auth_headers):
    own = make_unit("101")
    other = make_unit("102")
    headers = auth_headers(make_user("sara", UserRole.RESIDENT, unit_id=own.id))

    assert client.get(f"/api/chats/{other.id}/messages", headers=headers).status_code == 403
    response = client.post(f"/api/chats/{other.id}/messages", json={"message": "hi"}, headers=headers)
    assert response.status_code == 403


def test_resident_cannot_impersonate_admin(client: TestClient, make_unit, make_user, auth_headers):
    unit = make_unit()
    headers = auth_headers(make_user("sara", UserRole.RESIDENT, unit_id=unit.id))
    response = client.post(
        f"/api/chats/{unit.id}/messages",
        json={"message": "pay up", "senderType": "admin"},
        headers=headers,
    )
    assert response.status_code == 403


def test_body_unit_must_match_path(client: TestClient, make_unit, admin_headers):
    unit = make_unit()
    response = client.post(
        f"/api/chats/{unit.id}/messages",
        json={"unitId": unit.id + 1, "message": "hi"},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_empty_message_is_rejected(client: TestClient, make_unit, admin_headers):
    unit = make_unit()
    response = client.post(f"/api/chats/{unit.id}/messages", json={"message": ""}, headers=admin_headers)
    assert response.status_code == 400


def test_message_to_unknown_unit(client: TestClient, admin_headers):
    response = client.post("/api/chats/999/messages", json={"message": "hi"}, headers=admin_headers)
    assert response.status_code == 404


def test_chat_requires_token(client: TestClient, make_unit):
    unit = make_unit()
    assert client.get(f"/api/chats/{unit.id}/messages").status_code == 401
