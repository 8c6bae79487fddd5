# ruff: noqa: E402
# File: /tests/conftest.py
import os
import pathlib
import sys

# Make repo root importable as "app"
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Settings are read at import time; point them at the test database first
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-unit-tests-1234567890")

from typing import Dict, Optional, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.db.base_class import Base
from app.db.session import engine
from app.main import app
from app.models import User
from app.schemas.user import UserInput
from app.services.user_store import EmailTakenError

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

VALID_USER = {
    "firstName": "Alice",
    "lastName": "Liddell",
    "email": "alice@example.com",
    "password": "Abc12345!",
    "phoneNumber": "+442083661177",
}


@pytest.fixture(scope="session", autouse=True)
def _create_schema():
    Base.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    connection = engine.connect()
    trans = connection.begin()
    try:
        session = TestingSessionLocal(bind=connection)
        yield session
    finally:
        session.close()
        trans.rollback()
        connection.close()


@pytest.fixture()
def client(db_session):
    from app.db.session import get_db  # late import to avoid circulars

    def _override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


class FakeUserStore:
    """In-memory UserStore for service-level tests."""

    def __init__(self, fail_with: Optional[Exception] = None, fail_on: Tuple[str, ...] = ()):
        self.users: Dict[str, User] = {}
        self.passwords: Dict[str, str] = {}
        self.fail_with = fail_with
        self.fail_on = fail_on
        self.created = []
        self.lookups = 0

    def _maybe_fail(self, name: str) -> None:
        if self.fail_with is not None and (not self.fail_on or name in self.fail_on):
            raise self.fail_with

    def add(self, user_id: str, email: str, password: str) -> User:
        user = User(
            id=user_id,
            first_name="Test",
            last_name="User",
            email=email,
            hashed_password="unused",
            phone_number="+442083661177",
            profile_picture="",
        )
        self.users[email] = user
        self.passwords[email] = password
        return user

    async def email_exists(self, email: str) -> bool:
        self.lookups += 1
        self._maybe_fail("email_exists")
        return email in self.users

    async def create(self, data: UserInput) -> User:
        self._maybe_fail("create")
        if data.email in self.users:
            raise EmailTakenError(data.email)
        self.created.append(data)
        return self.add(f"id-{len(self.created)}", data.email, data.password)

    async def find_by_credentials(self, email: str, password: str) -> Optional[User]:
        self._maybe_fail("find_by_credentials")
        user = self.users.get(email)
        if user is None or self.passwords.get(email) != password:
            return None
        return user


@pytest.fixture()
def fake_store():
    return FakeUserStore()
