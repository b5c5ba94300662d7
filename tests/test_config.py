"""Tests for configuration management."""

from audit_trail.config import Settings


class TestSettings:
    def test_default_settings(self, monkeypatch):
        for name in ("HOST", "PORT", "LOG_LEVEL", "CORS_ORIGINS", "RATE_LIMIT_ENABLED", "SAVE_RATE_LIMIT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.host == "0.0.0.0"
        assert settings.port == 5000
        assert settings.log_level == "INFO"
        assert settings.rate_limit_enabled is False
        assert settings.save_rate_limit == "60/minute"
        assert settings.cors_origins_list == ["*"]

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")

        assert Settings(_env_file=None).port == 8080

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_rate_limit_from_environment(self, monkeypatch):
        monkeypatch.setenv("RATE_LIMIT_ENABLED", "true")
        monkeypatch.setenv("SAVE_RATE_LIMIT", "5/second")

        settings = Settings(_env_file=None)

        assert settings.rate_limit_enabled is True
        assert settings.save_rate_limit == "5/second"
