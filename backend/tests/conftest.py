"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.core.security import token_service
from app.database import get_mongo_db
from app.main import app


@pytest.fixture
def mongo_db():
    """In-memory Motor-compatible database."""
    return AsyncMongoMockClient()["test_soloDB"]


@pytest.fixture
def client(mongo_db):
    """TestClient wired to the in-memory database (lifespan is not run)."""
    app.dependency_overrides[get_mongo_db] = lambda: mongo_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    """Put a token cookie for the given email on the test client."""
    def _login(email: str) -> str:
        token = token_service.issue(email)
        client.cookies.set("token", token)
        return token
    return _login


@pytest.fixture
def sample_job() -> dict:
    return {
        "title": "Build a deck",
        "category": "carpentry",
        "deadline": "2024-06-01",
        "buyer": {"email": "a@x.com", "name": "Alice"},
        "min_price": 100,
        "max_price": 500,
    }
