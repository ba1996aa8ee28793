"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src import models  # noqa: F401
from src.database import Base, get_db
from src.main import app
from src.models.product import Product
from src.models.user import User
from src.services.auth import get_password_hash


class AuthHeaders(dict):
    """Dict subclass that also stores the username."""

    def __init__(self, *args, username: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.username = username


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("TEST_DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


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
def alice(db):
    """A stored user with a bcrypt password."""
    user = User(username="alice", password_hash=get_password_hash("pw123"), mode=0)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def auth_headers(client, alice):
    """Log alice in and return bearer auth headers."""
    response = client.post("/login", json={"username": "alice", "password": "pw123"})
    assert response.status_code == 200
    token = response.json()["token"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, username="alice")


@pytest.fixture
def other_user_headers(client, db):
    """Log in a second user and return bearer auth headers."""
    db.add(User(username="bob", password_hash=get_password_hash("bobpass"), mode=1))
    db.commit()
    response = client.post("/login", json={"username": "bob", "password": "bobpass"})
    assert response.status_code == 200
    token = response.json()["token"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, username="bob")


@pytest.fixture
def products(db):
    """Seed a small catalog."""
    rows = [
        Product(jancode="4901234567890", name="Green Tea 500ml", date_discount=60, date_recall=40),
        Product(jancode="4909876543210", name="Rice Crackers", date_discount=30, date_recall=20),
        Product(jancode="4900000000017", name="Instant Ramen", date_discount=90, date_recall=60),
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture
def session_factory():
    """Session factory for tests that need their own connections."""
    return TestingSessionLocal


@pytest.fixture(scope="function")
def server_error_client(db):
    """Test client that returns 500 responses instead of re-raising server errors."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
