"""
Unit tests for the legal config server.

This module tests the route handler, the request logging and fault handling
middleware, and the uvicorn entry point, with uvicorn mocked out.
"""

import logging
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from src.server import config
from src.server import server as server_module
from src.shared.schemas.legal_config import LegalConfig

CONFIG_URL = f"{config.API_PREFIX}{config.CONFIG_ENDPOINT_PATH}"


def test_build_legal_config_returns_defaults():
    result = server_module.build_legal_config()
    assert isinstance(result, LegalConfig)
    assert result == LegalConfig.from_defaults()


@pytest.mark.asyncio
async def test_get_config_handler():
    response = await server_module.get_config()
    assert response.smic == 1398.69
    assert response.tax_rate_low == 0.11
    assert response.tax_rate_high == 0.30
    assert response.legal_points_method == "Pilotelle"


def test_config_route_answers_get_only(test_client):
    assert test_client.get(CONFIG_URL).status_code == 200
    assert test_client.post(CONFIG_URL).status_code == 405


def test_lifespan_logs_startup_and_shutdown(test_app, caplog):
    caplog.set_level(logging.INFO)
    with TestClient(test_app):
        pass

    assert "Starting server" in caplog.text
    assert CONFIG_URL in caplog.text
    assert "Shutting down server" in caplog.text


class TestAccessLog:
    def test_request_is_logged(self, test_client, caplog, monkeypatch):
        monkeypatch.setattr("src.server.server.ACCESS_LOG", True)
        caplog.set_level(logging.INFO)

        test_client.get(CONFIG_URL)

        assert f"GET {CONFIG_URL} -> 200" in caplog.text

    def test_not_found_is_logged(self, test_client, caplog, monkeypatch):
        monkeypatch.setattr("src.server.server.ACCESS_LOG", True)
        caplog.set_level(logging.INFO)

        test_client.get(f"{config.API_PREFIX}/unknown")

        assert f"GET {config.API_PREFIX}/unknown -> 404" in caplog.text

    def test_handler_fault_is_logged_as_500(self, test_client, caplog, monkeypatch):
        monkeypatch.setattr("src.server.server.ACCESS_LOG", True)
        caplog.set_level(logging.INFO)

        with patch(
            "src.server.server.build_legal_config",
            side_effect=RuntimeError("boom"),
        ):
            test_client.get(CONFIG_URL)

        assert f"GET {CONFIG_URL} -> 500" in caplog.text

    def test_access_log_disabled(self, test_client, caplog, monkeypatch):
        monkeypatch.setattr("src.server.server.ACCESS_LOG", False)
        caplog.set_level(logging.INFO)

        response = test_client.get(CONFIG_URL)

        assert response.status_code == 200
        assert f"GET {CONFIG_URL} ->" not in caplog.text


class TestUnhandledErrors:
    def test_handler_fault_returns_500(self, test_client, caplog):
        caplog.set_level(logging.INFO)

        with patch(
            "src.server.server.build_legal_config",
            side_effect=RuntimeError("boom"),
        ):
            response = test_client.get(CONFIG_URL)

        assert response.status_code == 500
        assert response.json() == {
            config.PAYLOAD_KEY_DETAIL: config.ERROR_MSG_INTERNAL
        }
        assert "Unhandled error in GET" in caplog.text
        assert "boom" in caplog.text

    def test_later_requests_still_served(self, test_client):
        with patch(
            "src.server.server.build_legal_config",
            side_effect=RuntimeError("boom"),
        ):
            assert test_client.get(CONFIG_URL).status_code == 500

        assert test_client.get(CONFIG_URL).status_code == 200


class TestRun:
    def test_run_binds_port_from_env(self, clean_env):
        clean_env.setenv("PORT", "9090")
        with patch("src.server.server.uvicorn.run") as mock_run:
            server_module.run()

        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args[0] is server_module.app
        assert kwargs["port"] == 9090
        assert kwargs["host"] == config.SERVER_HOST
        assert kwargs["reload"] is False
        assert kwargs["log_config"] is None
        assert kwargs["access_log"] is False

    def test_run_defaults_to_8080(self, clean_env):
        with patch("src.server.server.uvicorn.run") as mock_run:
            server_module.run()

        assert mock_run.call_args.kwargs["port"] == 8080

    def test_run_empty_port_defaults_to_8080(self, clean_env):
        clean_env.setenv("PORT", "")
        with patch("src.server.server.uvicorn.run") as mock_run:
            server_module.run()

        assert mock_run.call_args.kwargs["port"] == 8080

    def test_run_with_reload_uses_import_string(self, clean_env):
        clean_env.setenv("RELOAD", "true")
        with patch("src.server.server.uvicorn.run") as mock_run:
            server_module.run()

        args, kwargs = mock_run.call_args
        assert args[0] == "src.server.server:app"
        assert kwargs["reload"] is True

    def test_run_invalid_port_fails_before_binding(self, clean_env):
        clean_env.setenv("PORT", "eighty")
        with patch("src.server.server.uvicorn.run") as mock_run:
            with pytest.raises(ValueError, match="PORT must be an integer"):
                server_module.run()

        mock_run.assert_not_called()
