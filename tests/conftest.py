import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.server.server import app as fastapi_app


@pytest.fixture(scope="module")
def test_app() -> FastAPI:
    """Create a test FastAPI application."""
    return fastapi_app


@pytest.fixture
def test_client(test_app: FastAPI) -> TestClient:
    """Create a test client for the FastAPI application."""
    return TestClient(test_app)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove the server settings from the environment for the test."""
    for name in ("PORT", "HOST", "RELOAD"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
