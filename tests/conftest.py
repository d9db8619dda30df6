"""Pytest configuration and fixtures."""

import os

# Use test database - PostgreSQL when DATABASE_URL is set, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"].replace("/giftlist", "/giftlist_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

# Must happen before the app reads its cached settings.
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from giftlist.config import get_settings  # noqa: E402
from giftlist.database import Base, SessionLocal, engine, get_db  # noqa: E402
from giftlist.main import app  # noqa: E402
from giftlist.services.store import SqlRecordStore  # noqa: E402
from memory_store import InMemoryRecordStore  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = SessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(params=["sql", "memory"])
def store(request, db):
    """Each record store implementation in turn."""
    if request.param == "sql":
        return SqlRecordStore(db)
    return InMemoryRecordStore()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def settings_override():
    """Apply settings changes to the app for one test."""

    def apply(**changes):
        settings = get_settings().model_copy(update=changes)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    return apply


@pytest.fixture
def register_user(client):
    """Register users through the API and return session headers for them."""

    def register(name: str, email: str | None, password: str = "testpass123", **extra):
        body = {"name": name, "password": password, **extra}
        if email is not None:
            body["email"] = email
        response = client.post("/api/auth/register", json=body)
        assert response.status_code == 200, response.text
        data = response.json()
        return AuthHeaders(
            {"X-Session-Id": data["sessionId"]}, user_id=data["user"]["id"], email=email
        )

    return register


@pytest.fixture
def auth_headers(register_user):
    """Create a user and return auth headers with user info."""
    return register_user("Alice", "alice@example.com")


@pytest.fixture
def family(client, auth_headers, register_user):
    """Alice's "Smith" group with Bob and Carol joined."""
    group = client.post("/api/family-groups", headers=auth_headers, json={"name": "Smith"}).json()
    bob = register_user("Bob", "bob@example.com")
    carol = register_user("Carol", "carol@example.com")
    for member in (bob, carol):
        response = client.post(
            "/api/family-groups/join", headers=member, json={"inviteCode": group["inviteCode"]}
        )
        assert response.status_code == 200
    return {"group": group, "alice": auth_headers, "bob": bob, "carol": carol}
