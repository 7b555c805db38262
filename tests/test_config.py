"""
Tests for environment-driven settings.
"""

import pytest

from invoice_tracker.config import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "HOST", "INVOICE_TABLE", "CORS_ALLOWED_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.PORT == 5000
    assert settings.HOST == "0.0.0.0"
    assert settings.INVOICE_TABLE == "invoice"
    assert settings.CORS_ALLOWED_ORIGINS == []
    assert settings.LOG_LEVEL == "INFO"


def test_values_read_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.PORT == 8080
    assert settings.CORS_ALLOWED_ORIGINS == ["http://a.test", "http://b.test"]
    assert settings.LOG_LEVEL == "DEBUG"


def test_validate_reports_missing_store_settings(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "")
    monkeypatch.delenv("SUPABASE_KEY", raising=False)

    with pytest.raises(ValueError, match="SUPABASE_URL, SUPABASE_KEY"):
        Settings().validate()


def test_validate_passes_when_configured(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "http://localhost:54321")
    monkeypatch.setenv("SUPABASE_KEY", "key")

    Settings().validate()
