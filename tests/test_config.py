"""
Test configuration management
"""
from ticket_triage.config import Settings, get_settings


def test_settings_singleton():
    """Test settings returns same instance"""
    settings1 = get_settings()
    settings2 = get_settings()
    assert settings1 is settings2


def test_settings_defaults(monkeypatch):
    """Test default values"""
    for var in ("APP_ENV", "API_PORT", "LOG_LEVEL", "CLASSIFICATION_MAX_WORKERS"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.app_env == "development"
    assert settings.api_port == 8000
    assert settings.log_level == "INFO"
    assert settings.classification_max_workers == 4


def test_settings_from_environment(monkeypatch):
    """Test environment variables override defaults"""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CLASSIFICATION_MAX_WORKERS", "16")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.classification_max_workers == 16
