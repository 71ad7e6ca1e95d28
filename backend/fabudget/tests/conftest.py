"""
Shared test fixtures: in-memory database and API client.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from fabudget.db.base import Base  # noqa: E402
from fabudget.db.session import get_db, init_db  # noqa: E402
from fabudget.main import app  # noqa: E402

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def tables():
    """Fresh schema for every test."""
    init_db(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def user(client):
    response = client.post(
        "/api/users/register",
        json={"name": "Test User", "email": "test@example.com", "password": "Password123"}
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def budget(client, user):
    response = client.post(
        "/api/budgets",
        json={"month": 3, "year": 2025, "title": "March", "userId": user["id"]}
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def income_payload(budget):
    return {
        "type": "salary",
        "amount": 1000,
        "source": "Employer",
        "expectedDate": "2025-03-01",
        "weekOfArrival": 1,
        "received": True,
        "budgetId": budget["id"],
    }


@pytest.fixture
def expense_payload(budget):
    return {
        "name": "Rent",
        "budgetedAmount": 400,
        "actualAmount": 400,
        "category": "Housing",
        "expectedPurchaseDate": "2025-03-05",
        "status": "Paid",
        "budgetId": budget["id"],
    }
