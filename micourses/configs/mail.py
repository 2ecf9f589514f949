"""
Mailer configuration settings.

SMTP transport used for verification links and reset codes.

Dependencies: pydantic_settings
System role: Transactional email configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from micourses.configs.base import BaseSettings


class MailSettings(BaseSettings):
    """SMTP settings for transactional email."""

    model_config = SettingsConfigDict(env_prefix="MAIL_")

    smtp_host: str | None = Field(default=None, description="SMTP server host")
    smtp_port: int = Field(default=587, description="SMTP server port")
    username: str | None = Field(default=None, description="SMTP login")
    password: str | None = Field(default=None, description="SMTP password")
    sender: str = Field(
        default="no-reply@micourses.local",
        description="From address on outgoing mail",
    )
    use_tls: bool = Field(default=True, description="Upgrade the connection with STARTTLS")
    verify_base_url: str = Field(
        default="http://localhost:8000/verify",
        description="Public base URL that verification tokens are appended to",
    )

    @property
    def is_configured(self) -> bool:
        """True when an SMTP host is set."""
        return bool(self.smtp_host)
