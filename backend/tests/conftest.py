import os
import sys
import time
from datetime import datetime, timedelta, timezone
from itertools import count

import jwt
import pytest

# Selects TestingConfig; must be set before src.config.settings is imported
os.environ["APP_ENV"] = "testing"

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from fastapi.testclient import TestClient
from src.config.settings import TestingConfig
from src.fastapi_app import create_fastapi_app
from src.utils.time_utils import format_timestamp

JWT_SECRET = TestingConfig.JWT_SECRET


def make_token(username="alice", expires_in=300, secret=JWT_SECRET):
    now = int(time.time())
    return jwt.encode(
        {
            "sub": username,
            "username": username,
            "iat": now,
            "exp": now + expires_in,
        },
        secret,
        algorithm="HS256",
    )


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def app():
    """Create a new FastAPI app (with its own empty in-memory store) for each test."""
    return create_fastapi_app()


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def auth_headers():
    """Authentication headers with a valid token for alice."""
    return bearer(make_token("alice"))


@pytest.fixture()
def register(client):
    """Register a user through the API and return its bearer headers."""

    def _register(username, password="pass1"):
        res = client.post(
            "/api/auth/register", json={"username": username, "password": password}
        )
        assert res.status_code == 201, res.text
        return bearer(res.json()["token"])

    return _register


@pytest.fixture()
def ticking_clock(monkeypatch):
    """
    Give every new message a distinct, increasing timestamp.

    Message timestamps are sort keys; two writes in the same millisecond
    would land on the same key.
    """
    start = datetime(2025, 1, 27, 12, 0, 0, tzinfo=timezone.utc)
    ticks = count()

    def _next():
        return format_timestamp(start + timedelta(seconds=next(ticks)))

    monkeypatch.setattr("src.domain.entities.channel_message.utc_now_iso", _next)
    monkeypatch.setattr("src.domain.entities.direct_message.utc_now_iso", _next)
    return _next
