from __future__ import annotations

from pipocaflix_backend import config
from pipocaflix_backend.config import CatalogSettings, SheetId


def test_defaults_match_published_sheets() -> None:
    settings = CatalogSettings()

    assert settings.cache_ttl_seconds == 300
    assert settings.request_timeout_seconds == 12.0
    assert settings.max_attempts == 3
    assert settings.backoff_unit_seconds == 0.8
    assert settings.sheet_gid(SheetId.MOVIES) == 300449936
    assert settings.sheet_gid(SheetId.SERIES) == 413183487
    assert settings.sheet_gid(SheetId.EPISODES) == 1394045118


def test_sheet_url_and_cache_key() -> None:
    settings = CatalogSettings(sheets_base_url="https://docs.example/pub?output=csv")

    assert settings.sheet_url(SheetId.SERIES) == "https://docs.example/pub?output=csv&gid=413183487"
    assert settings.cache_key(SheetId.SERIES) == "sheet_413183487"


def test_from_env_overrides_endpoints(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setattr(config, "load_env", lambda: None)
    monkeypatch.setenv("PIPOCAFLIX_RELAY_URL", "https://relay.internal/")
    monkeypatch.setenv("PIPOCAFLIX_SHEETS_URL", "   ")

    settings = CatalogSettings.from_env()

    assert settings.relay_base_url == "https://relay.internal/"
    assert settings.sheets_base_url == config.SHEETS_EXPORT_BASE_URL


def test_from_env_defaults_when_unset(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setattr(config, "load_env", lambda: None)
    monkeypatch.delenv("PIPOCAFLIX_RELAY_URL", raising=False)
    monkeypatch.delenv("PIPOCAFLIX_SHEETS_URL", raising=False)

    settings = CatalogSettings.from_env()

    assert settings.relay_base_url == config.RELAY_BASE_URL
