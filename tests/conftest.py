"""Test configuration and fixtures for the BookHub API."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["INIT_DB_ON_STARTUP"] = "false"

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from src.db.common.database_connection import create_tables, drop_tables, get_db
from src.db.init_db import seed_initial_data
from src.payments.stripe.payment_schemas import GatewayResult
from src.payments.stripe.stripe_service import get_payment_gateway


class FakeGateway:
    """In-memory stand-in for the payment gateway that records every call."""

    def __init__(self):
        self.intents: Dict[str, dict] = {}
        self.create_calls: List[dict] = []
        self.fail_with: Optional[GatewayResult] = None

    def create_payment_intent(self, amount: int, currency: str, metadata: Optional[Dict[str, str]] = None):
        self.create_calls.append({"amount": amount, "currency": currency, "metadata": metadata})
        if self.fail_with is not None:
            return self.fail_with
        intent_id = f"pi_test_{len(self.intents) + 1}"
        intent = {
            "id": intent_id,
            "amount": amount,
            "currency": currency,
            "status": "requires_payment_method",
            "client_secret": f"{intent_id}_secret_abc",
            "metadata": dict(metadata or {}),
        }
        self.intents[intent_id] = intent
        return GatewayResult.ok(intent)

    def retrieve_payment_intent(self, payment_intent_id: str):
        if self.fail_with is not None:
            return self.fail_with
        intent = self.intents.get(payment_intent_id)
        if intent is None:
            return GatewayResult.fail("resource_missing", f"No such payment_intent: '{payment_intent_id}'")
        return GatewayResult.ok(intent)


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=test_engine)
    yield test_engine
    drop_tables(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_db(db):
    seed_initial_data(db)
    return db


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture(name="client")
def client_fixture(session_factory, gateway):
    """Create a test client wired to the in-memory database and fake gateway."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()
