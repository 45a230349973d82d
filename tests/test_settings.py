from config import DEFAULT_SETTINGS_MODULE, get_settings_module


def test_settings_module_from_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "Production")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "config.testing"


def test_unknown_or_missing_env_uses_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == DEFAULT_SETTINGS_MODULE

    assert get_settings_module("staging") == "config.development"


def test_explicit_env_wins_over_variable(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module("dev") == "config.development"
