import pytest

from core.utils import settings as settings_mod


@pytest.fixture(autouse=True)
def _fresh_settings():
    settings_mod.refresh_settings()
    yield
    settings_mod.refresh_settings()


def test_defaults(monkeypatch):
    for name in (
        "DATABASE_URL",
        "APP_ENV",
        "CORS_ORIGINS",
        "SESSION_MAX_AGE_HOURS",
        "SESSION_COOKIE_NAME",
        "UPLOAD_MAX_BYTES",
    ):
        monkeypatch.delenv(name, raising=False)
    s = settings_mod.get_settings()
    assert s.database_url == settings_mod.DEFAULT_DATABASE_URL
    assert s.app_env == "development"
    assert s.is_production is False
    assert s.cors_origins == settings_mod.DEFAULT_CORS_ORIGINS
    assert s.session_cookie_name == "portfolio_session"
    assert s.session_max_age_seconds == 720 * 3600
    assert s.upload_max_bytes == 5 * 1024 * 1024


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("APP_ENV", "Production")
    monkeypatch.setenv("AUTO_MIGRATE", "no")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("PUBLIC_CACHE_TTL_SECONDS", "0")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = settings_mod.get_settings()
    assert s.is_production is True
    assert s.auto_migrate is False
    assert s.cors_origins == ("https://a.example", "https://b.example")
    assert s.public_cache_ttl_seconds == 0.0
    assert s.log_level == "DEBUG"


def test_settings_are_cached_until_refreshed(monkeypatch):
    monkeypatch.setenv("SESSION_COOKIE_NAME", "first")
    assert settings_mod.get_settings().session_cookie_name == "first"
    monkeypatch.setenv("SESSION_COOKIE_NAME", "second")
    assert settings_mod.get_settings().session_cookie_name == "first"
    settings_mod.refresh_settings()
    assert settings_mod.get_settings().session_cookie_name == "second"


def test_invalid_integer(monkeypatch):
    monkeypatch.setenv("SESSION_MAX_AGE_HOURS", "forever")
    with pytest.raises(ValueError):
        settings_mod.get_settings()


@pytest.mark.parametrize(
    "raw,expected",
    [(None, True), ("", False), ("0", False), ("off", False), ("1", True), ("YES", True), ("maybe", True)],
)
def test_normalize_bool(raw, expected):
    assert settings_mod._normalize_bool(raw, default=True) is expected
