"""
Pytest fixtures for the subscription tracker.

Provides:
- Subscription factory for the pure engines
- In-memory store (no database)
- In-memory SQLite session wired into the FastAPI app
- An authenticated API client
"""

from datetime import date
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.database import get_session
from app.main import app
from app.models.enums import BillingCycle, SubscriptionCategory
from app.models.subscription import Subscription
from app.repositories.memory import InMemorySubscriptionStore


@pytest.fixture
def make_sub():
    """Build an unsaved Subscription with sensible defaults."""
    def _make(name="Netflix", cost=10.0, billing_cycle=BillingCycle.monthly,
              category=SubscriptionCategory.entertainment,
              next_renewal_date=date(2024, 6, 15), **extra):
        return Subscription(
            user_id=extra.pop("user_id", uuid4()),
            name=name,
            cost=cost,
            billing_cycle=billing_cycle,
            category=category,
            next_renewal_date=next_renewal_date,
            **extra,
        )
    return _make


@pytest.fixture
def user_id():
    return uuid4()


@pytest.fixture
def memory_store():
    return InMemorySubscriptionStore()


# =============================================================================
# DATABASE / API FIXTURES
# =============================================================================

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    credentials = {"email": "ana@example.com", "password": "s3cret-pass"}
    response = client.post("/auth/register", json=credentials)
    assert response.status_code == 201

    response = client.post(
        "/auth/login",
        data={"username": credentials["email"], "password": credentials["password"]},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
