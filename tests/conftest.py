# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.

The suite runs against a throwaway SQLite file; tables are created and
dropped around every test.
"""

import os
import tempfile

os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(tempfile.mkdtemp(prefix="buildingdesk-"), "test.db")
os.environ.setdefault("SCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from typing import Generator

from database import drop_db, get_session_context, init_db
from main import app
from models import Unit, UnitStatus, UserRole
from services.user_service import UserService
from utils.security import create_access_token

DEFAULT_PASSWORD = "correct-horse"


@pytest.fixture(autouse=True)
def database():
    """Fresh schema for each test."""
    init_db()
    yield
    drop_db()


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


def _create_user(username: str, role: UserRole, unit_id=None, password: str = DEFAULT_PASSWORD):
    with get_session_context() as db:
        return UserService.create_user(
            db,
            name=username.title(),
            username=username,
            password=password,
            role=role,
            unit_id=unit_id,
        )


def _headers(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
def make_user():
    """Factory: make_user(username, role, unit_id=None) -> persisted User."""
    return _create_user


@pytest.fixture
def make_unit():
    """Factory: make_unit(unit_number, floor=1) -> persisted Unit."""
    def _make(unit_number: str = "101", floor: int = 1) -> Unit:
        with get_session_context() as db:
            unit = Unit(unit_number=unit_number, floor=floor, status=UnitStatus.ACTIVE)
            db.add(unit)
            db.flush()
            db.refresh(unit)
            return unit
    return _make


@pytest.fixture
def auth_headers():
    """auth_headers(user) -> Authorization header dict for that user."""
    return _headers


@pytest.fixture
def super_admin():
    return _create_user("root", UserRole.SUPER_ADMIN)


@pytest.fixture
def building_admin():
    return _create_user("manager", UserRole.BUILDING_ADMIN)


@pytest.fixture
def super_admin_headers(super_admin):
    return _headers(super_admin)


@pytest.fixture
def admin_headers(building_admin):
    return _headers(building_admin)
