"""Shared fixtures: an application bound to a throwaway SQLite file."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from ledger_api.app.core.config import Settings
from ledger_api.app.core.db import Database
from ledger_api.app.main import create_app


FIXED_NOW = datetime(2024, 3, 5, 14, 30)


@pytest.fixture
def settings(tmp_path):
    # The lowest bcrypt cost keeps the suite fast.
    return Settings(database_url=str(tmp_path / "ledger.db"), password_hash_rounds=4)


@pytest.fixture
def database(settings):
    db = Database(settings.database_url)
    db.init()
    return db


@pytest.fixture
def app(settings):
    return create_app(settings, clock=lambda: FIXED_NOW)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def register(client, name="Ana", email="a@x.com", password="abcd", confirmation=None):
    return client.post(
        "/register",
        json={
            "name": name,
            "email": email,
            "password": password,
            "password_confirmation": password if confirmation is None else confirmation,
        },
    )


def login(client, email="a@x.com", password="abcd"):
    return client.post("/login", json={"email": email, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}
