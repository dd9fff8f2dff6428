from __future__ import annotations

from datetime import date

import pytest
from flask.testing import FlaskClient

from fintechora.app import create_app
from fintechora.config import AppConfig
from fintechora.storage.database import Store


@pytest.fixture()
def config(tmp_path) -> AppConfig:
    return AppConfig(
        database_path=str(tmp_path / "test.db"),
        secret_key="test-secret",
        testing=True,
    )


@pytest.fixture()
def app(config):
    return create_app(config)


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def store(tmp_path) -> Store:
    db = Store(tmp_path / "store.db")
    db.init_db()
    return db


@pytest.fixture()
def auth_client(client) -> FlaskClient:
    """A client already signed in as a freshly registered user."""
    resp = client.post(
        "/api/auth/register",
        json={"name": "Asha", "email": "asha@example.com", "password": "correct-horse"},
    )
    assert resp.status_code == 201
    return client


@pytest.fixture()
def deposit_payload():
    """Factory for a valid deposit request body."""

    def make(**overrides) -> dict:
        payload = {
            "bankName": "State Bank of India",
            "principal": 100000,
            "interestRate": 6.0,
            "durationMonths": 12,
            "startDate": date.today().isoformat(),
        }
        payload.update(overrides)
        return payload

    return make
