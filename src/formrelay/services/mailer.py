"""
Mail dispatch over SMTP.

A single ``Mailer`` is created when the application starts and shared by
every request. It opens a fresh SMTP session per message with aiosmtplib.
"""

from __future__ import annotations

from email.message import EmailMessage

import aiosmtplib

from formrelay.config import Settings
from formrelay.exceptions import MailTransportError
from formrelay.schemas.forms import Attachment, CareerApplication, ContactMessage
from formrelay.services.templates import build_career_email, build_contact_email
from formrelay.utils.logger import get_logger

logger = get_logger(__name__)


class Mailer:
    """
    Process-wide handle on the SMTP provider.

    Lifecycle: created at startup, verified once in the background, then used
    until shutdown. A failed verification is logged but does not disable the
    handle; sends simply fail at call time.
    """

    def __init__(self, config: Settings) -> None:
        self.config = config
        self.verified: bool | None = None

    @property
    def enabled(self) -> bool:
        return self.config.email_configured

    def _connection_options(self) -> dict:
        # SMTP_SECURE=true means implicit TLS (465), false means STARTTLS (587)
        return {
            "hostname": self.config.smtp_host,
            "port": self.config.smtp_port,
            "use_tls": self.config.smtp_secure,
            "start_tls": not self.config.smtp_secure,
            "timeout": self.config.smtp_timeout_seconds,
        }

    async def verify(self) -> bool:
        """
        Check that the provider accepts a connection and our credentials.

        Returns:
            True when the login succeeded, False otherwise (never raises)
        """
        if not self.enabled:
            logger.warning("SMTP credentials not configured - mail sends will fail")
            self.verified = False
            return False

        client = aiosmtplib.SMTP(**self._connection_options())
        try:
            async with client:
                await client.login(self.config.email_user, self.config.email_pass)
        except (aiosmtplib.SMTPException, OSError) as exc:
            logger.warning("SMTP verification failed: %s", exc)
            self.verified = False
            return False

        logger.info("SMTP ready (%s:%s)", self.config.smtp_host, self.config.smtp_port)
        self.verified = True
        return True

    async def send(self, message: EmailMessage) -> None:
        """
        Deliver a message, waiting for the provider to accept it.

        Raises:
            MailTransportError: If credentials are missing or the SMTP exchange fails
        """
        if not self.enabled:
            raise MailTransportError("SMTP credentials not configured")

        try:
            await aiosmtplib.send(
                message,
                username=self.config.email_user,
                password=self.config.email_pass,
                **self._connection_options(),
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            raise MailTransportError(f"Failed to send email: {exc}") from exc

        logger.info("Email sent: %s", message["Subject"])

    def _addresses(self) -> tuple[str, str]:
        recipient = self.config.recipient_email
        if not self.config.email_user or not recipient:
            raise MailTransportError("Sender or recipient address not configured")
        return self.config.email_user, recipient

    async def send_career_application(
        self, application: CareerApplication, resume: Attachment
    ) -> None:
        """Compose and send a job application with the resume attached."""
        sender, recipient = self._addresses()
        message = build_career_email(
            application,
            resume,
            sender_name=self.config.sender_name,
            sender=sender,
            recipient=recipient,
        )
        await self.send(message)

    async def send_contact_message(self, contact: ContactMessage) -> None:
        """Compose and send a contact inquiry with Reply-To set to the submitter."""
        sender, recipient = self._addresses()
        message = build_contact_email(
            contact,
            sender_name=self.config.sender_name,
            sender=sender,
            recipient=recipient,
        )
        await self.send(message)
