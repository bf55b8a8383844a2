"""Tests for configuration helpers."""

import pytest

from fitness_tracker.config import Settings, parse_cors_origins


@pytest.mark.parametrize("raw", [None, "", "  ", "*"])
def test_parse_cors_origins_wildcard(raw: str | None) -> None:
    assert parse_cors_origins(raw) == ["*"]


def test_parse_cors_origins_list() -> None:
    raw = "https://app.example.com/, http://localhost:5173,,"

    assert parse_cors_origins(raw) == [
        "https://app.example.com",
        "http://localhost:5173",
    ]


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "key")
    monkeypatch.setenv("JWT_SECRET", "env-secret")
    monkeypatch.setenv("ACCESS_TOKEN_TTL_MINUTES", "15")

    settings = Settings()

    assert settings.supabase_url == "https://env.supabase.co"
    assert settings.access_token_ttl_minutes == 15
    assert settings.jwt_algorithm == "HS256"
    assert settings.password_hash_rounds == 10
