"""Outbound email to applicants over SMTP."""

import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage

from vacancies_service.config import Settings

logger = logging.getLogger(__name__)


class NotifierError(Exception):
    """Raised when the mail relay cannot accept a message."""
    pass


class Notifier:
    """Sends one plain-text message per call. No retries, no queue."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str = "",
        password: str = "",
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "Notifier":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            timeout=settings.smtp_timeout,
        )

    def build_message(self, recipient: str, subject: str, body: str) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self.username
        msg["To"] = recipient
        msg["Subject"] = subject
        msg.set_content(body)
        return msg

    def send_sync(self, recipient: str, subject: str, body: str) -> None:
        try:
            msg = self.build_message(recipient, subject, body)
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                server.ehlo()
                if server.has_extn("starttls"):
                    server.starttls(context=ssl.create_default_context())
                    server.ehlo()
                if self.username:
                    server.login(self.username, self.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            raise NotifierError(str(e) or type(e).__name__) from e
        logger.info("Sent email to %s | Subject: %s", recipient, subject)

    async def send(self, recipient: str, subject: str, body: str) -> None:
        """Deliver the message, running the blocking SMTP exchange off the event loop."""
        await asyncio.to_thread(self.send_sync, recipient, subject, body)
