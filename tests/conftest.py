import pytest

from jwt_issuer import jwt_utils


@pytest.fixture
def client():
    """Shared TestClient fixture for the HTTP tests"""
    from fastapi.testclient import TestClient
    from jwt_issuer.api import app
    return TestClient(app)


@pytest.fixture
def secret():
    return "mysecret"


@pytest.fixture
def frozen_time(monkeypatch):
    """Pin the issuer's clock to a fixed UNIX timestamp."""
    now = 1_700_000_000.0
    monkeypatch.setattr(jwt_utils.time, "time", lambda: now)
    return now
