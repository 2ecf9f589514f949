"""
SMTP mailer.

Sends plain-text verification links and one-time codes. smtplib is
blocking, so each send runs in a worker thread.

Dependencies: smtplib, email (stdlib), micourses.configs
System role: Transactional email delivery
"""

import asyncio
import logging
import smtplib
from email.header import Header
from email.mime.text import MIMEText

from micourses.configs.mail import MailSettings
from micourses.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class Mailer:
    """Plain-text transactional mail over SMTP."""

    def __init__(self, settings: MailSettings) -> None:
        self._settings = settings

    def _send_sync(self, to: str, subject: str, body: str) -> None:
        msg = MIMEText(body, "plain", "utf-8")
        msg["Subject"] = Header(subject, "utf-8")
        msg["From"] = self._settings.sender
        msg["To"] = to

        with smtplib.SMTP(self._settings.smtp_host, self._settings.smtp_port, timeout=30) as server:
            if self._settings.use_tls:
                server.starttls()
            if self._settings.username and self._settings.password:
                server.login(self._settings.username, self._settings.password)
            server.sendmail(self._settings.sender, [to], msg.as_string())

    async def send(self, to: str, subject: str, body: str) -> bool:
        """
        Send one message.

        Returns:
            bool: False when SMTP is not configured and the send was skipped

        Raises:
            UpstreamError: If the SMTP exchange fails
        """
        if not self._settings.is_configured:
            logger.warning("SMTP not configured, skipping email", extra={"subject": subject})
            return False
        try:
            await asyncio.to_thread(self._send_sync, to, subject, body)
        except (smtplib.SMTPException, OSError) as e:
            raise UpstreamError("Failed to send email", service="mailer", details={"error": str(e)}) from e
        logger.info("Email sent", extra={"subject": subject})
        return True

    async def send_best_effort(self, to: str, subject: str, body: str) -> bool:
        """Send, logging instead of raising on failure."""
        try:
            return await self.send(to, subject, body)
        except UpstreamError as e:
            logger.error("Email delivery failed", extra={"subject": subject, "error": str(e)})
            return False

    async def send_verification_email(self, to: str, token: str) -> bool:
        """Best-effort verification link; failure never blocks registration."""
        link = f"{self._settings.verify_base_url.rstrip('/')}/{token}"
        return await self.send_best_effort(
            to,
            "Email Verification",
            f"Please click the following link to verify your email: {link}",
        )

    async def send_reset_code(self, to: str, code: str) -> bool:
        """Password reset code; failure is raised to the caller."""
        return await self.send(
            to,
            "Password Reset Code",
            f"Your password reset code is {code}. It expires shortly and can be used once.",
        )

    async def send_recovery_code(self, to: str, code: str) -> bool:
        """Recovery email confirmation code; failure is raised to the caller."""
        return await self.send(
            to,
            "Confirm Your Recovery Email",
            f"Your recovery email confirmation code is {code}.",
        )
