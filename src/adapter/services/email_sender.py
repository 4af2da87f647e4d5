"""
Email transports

SMTP delivery for production and a logging transport for local runs.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from src.app.services.email_sender import IEmailSender

logger = logging.getLogger(__name__)


class SmtpEmailSender(IEmailSender):
    """Send multipart (text + html) mail through an SMTP relay."""

    def __init__(
        self,
        host: str,
        port: int,
        from_address: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.from_address = from_address
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def build_message(
        self, to_address: str, subject: str, text_body: str, html_body: str
    ) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = self.from_address
        message["To"] = to_address
        message.set_content(text_body)
        message.add_alternative(html_body, subtype="html")
        return message

    def _send_blocking(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as conn:
            if self.use_tls:
                conn.starttls()
            if self.username:
                conn.login(self.username, self.password or "")
            conn.send_message(message)

    async def send(
        self, to_address: str, subject: str, text_body: str, html_body: str
    ) -> None:
        message = self.build_message(to_address, subject, text_body, html_body)
        try:
            await asyncio.to_thread(self._send_blocking, message)
        except (smtplib.SMTPException, OSError):
            logger.warning("SMTP delivery to %s failed", to_address, exc_info=True)
            return
        logger.info("Sent %r email to %s", subject, to_address)


class LoggingEmailSender(IEmailSender):
    """Log messages instead of sending them (no SMTP host configured)."""

    async def send(
        self, to_address: str, subject: str, text_body: str, html_body: str
    ) -> None:
        logger.info("Email to %s: %s\n%s", to_address, subject, text_body)
        logger.debug(html_body)
