"""Tests for the application factory."""

import logging

import pytest
from fastapi.testclient import TestClient

from fitness_tracker.api.app import create_app
from fitness_tracker.containers import AppContainer


def test_health_check(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_cors_preflight_allows_any_origin(client: TestClient) -> None:
    response = client.options(
        "/login",
        headers={
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Authorization",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_unexpected_errors_return_500(container: AppContainer, monkeypatch) -> None:
    def explode(**_kwargs: object) -> None:
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(container.account_service, "login", explode)
    client = TestClient(create_app(container), raise_server_exceptions=False)

    response = client.post(
        "/login", json={"email": "alice@example.com", "password": "secret123"}
    )

    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error"}


def test_lifespan_logs_start_and_stop(
    container: AppContainer, caplog: pytest.LogCaptureFixture
) -> None:
    app_logger = logging.getLogger("fitness_tracker.api.app")
    app_logger.addHandler(caplog.handler)
    try:
        with TestClient(create_app(container)) as client:
            assert client.get("/health").status_code == 200
    finally:
        app_logger.removeHandler(caplog.handler)

    messages = [record.getMessage() for record in caplog.records]
    assert "Fitness tracker API starting (environment=test)" in messages
    assert "Fitness tracker API stopped" in messages
