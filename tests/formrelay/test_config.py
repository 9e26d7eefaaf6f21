"""Tests for configuration management."""

from formrelay.config import DEFAULT_ALLOWED_ORIGINS, Settings


class TestSettings:
    """Tests for application settings."""

    def test_settings_defaults(self, monkeypatch):
        """Test settings with default values."""
        for var in ("EMAIL_USER", "EMAIL_PASS", "HR_EMAIL", "PORT", "SMTP_HOST"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.email_user is None
        assert settings.smtp_host == "smtp.gmail.com"
        assert settings.smtp_port == 465
        assert settings.smtp_secure is True
        assert settings.smtp_timeout_seconds is None
        assert settings.port == 3000
        assert settings.max_upload_bytes == 5 * 1024 * 1024
        assert settings.allowed_origins == DEFAULT_ALLOWED_ORIGINS

    def test_settings_from_env(self, monkeypatch):
        """Test loading settings from environment variables."""
        monkeypatch.setenv("EMAIL_USER", "relay@example.com")
        monkeypatch.setenv("EMAIL_PASS", "app-password")
        monkeypatch.setenv("HR_EMAIL", "hr@example.com")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("SMTP_SECURE", "false")
        monkeypatch.setenv("SMTP_PORT", "587")
        monkeypatch.setenv("ALLOWED_ORIGINS", '["https://example.com"]')

        settings = Settings(_env_file=None)
        assert settings.email_user == "relay@example.com"
        assert settings.email_pass == "app-password"
        assert settings.hr_email == "hr@example.com"
        assert settings.port == 8080
        assert settings.smtp_secure is False
        assert settings.smtp_port == 587
        assert settings.allowed_origins == ["https://example.com"]

    def test_default_origins_not_shared(self):
        """Each instance gets its own copy of the default allow-list."""
        settings = Settings(_env_file=None)
        settings.allowed_origins.append("https://other.example")
        assert "https://other.example" not in DEFAULT_ALLOWED_ORIGINS


class TestDerivedSettings:
    """Tests for computed settings properties."""

    def test_recipient_prefers_hr_email(self):
        settings = Settings(_env_file=None, email_user="relay@example.com", hr_email="hr@example.com")
        assert settings.recipient_email == "hr@example.com"

    def test_recipient_falls_back_to_email_user(self, monkeypatch):
        monkeypatch.delenv("HR_EMAIL", raising=False)
        settings = Settings(_env_file=None, email_user="relay@example.com")
        assert settings.recipient_email == "relay@example.com"

    def test_email_configured_requires_both_credentials(self, monkeypatch):
        monkeypatch.delenv("EMAIL_PASS", raising=False)
        assert Settings(_env_file=None, email_user="relay@example.com").email_configured is False
        assert (
            Settings(_env_file=None, email_user="relay@example.com", email_pass="x").email_configured
            is True
        )
