"""Configuration management for the application."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:4200",
    "https://rsn-frontend.vercel.app",
    "https://rsn-omega.vercel.app",
    "https://rsn-production-07e6.up.railway.app",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # SMTP account (not required at startup, checked at send time)
    email_user: str | None = Field(default=None)
    email_pass: str | None = Field(default=None)

    # Destination mailbox for submissions
    hr_email: str | None = Field(default=None)

    # SMTP transport
    smtp_host: str = Field(default="smtp.gmail.com")
    smtp_port: int = Field(default=465)
    smtp_secure: bool = Field(default=True)
    smtp_timeout_seconds: float | None = Field(default=None)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    log_level: str = Field(default="INFO")

    # Cross-origin allow-list
    allowed_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))

    # Uploads are buffered in memory, so keep them small
    max_upload_bytes: int = Field(default=5 * 1024 * 1024)

    # Display name used in the From header of outgoing mail
    sender_name: str = Field(default="RSN")

    @property
    def recipient_email(self) -> str | None:
        """Mailbox that receives submissions, falling back to the SMTP account."""
        return self.hr_email or self.email_user

    @property
    def email_configured(self) -> bool:
        """Whether SMTP credentials are present."""
        return bool(self.email_user and self.email_pass)


# Global settings instance
settings = Settings()
