"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from typing import Any

# Settings are cached on first import, so the test environment goes in first
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "mediashelf-test-secret-key")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("COOKIE_SECURE", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from mediashelf.database import Base, get_db  # noqa: E402
from mediashelf.main import app  # noqa: E402

API = "/api/v1"

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite://"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def register_user(client: TestClient, username: str) -> dict[str, str]:
    """Register a user through the API and return bearer auth headers."""
    response = client.post(
        f"{API}/users/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": "correct-horse-battery",
        },
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def create_test_book(
    client: TestClient,
    headers: dict[str, str],
    title: str = "Test Book",
    **extra: Any,  # noqa: ANN401
) -> dict[str, Any]:
    """Register a book for the user behind ``headers``."""
    response = client.post(f"{API}/books", json={"title": title, **extra}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def create_test_library(
    client: TestClient,
    headers: dict[str, str],
    name: str = "Shelf",
    **extra: Any,  # noqa: ANN401
) -> dict[str, Any]:
    """Create a media library for the user behind ``headers``."""
    response = client.post(
        f"{API}/media-libraries", json={"name": name, **extra}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    """Auth headers for the primary test user."""
    return register_user(client, "alice")


@pytest.fixture
def other_headers(client: TestClient) -> dict[str, str]:
    """Auth headers for a second, unrelated user."""
    return register_user(client, "bob")
