"""Email sending via SMTP."""

from __future__ import annotations

import logging
import smtplib
import ssl
from email.message import EmailMessage as MimeMessage
from email.utils import formataddr
from typing import Protocol

from gemini_mail_digest.core.config import Settings
from gemini_mail_digest.core.errors import ConfigurationError
from gemini_mail_digest.models import EmailMessage

logger = logging.getLogger(__name__)

SENDER_DISPLAY_NAME = "Gemini Digest"
SMTP_TIMEOUT_SEC = 30


class Notifier(Protocol):
    def send(self, message: EmailMessage) -> None:
        ...


def build_mime_message(message: EmailMessage, sender: str) -> MimeMessage:
    msg = MimeMessage()
    msg["Subject"] = message.subject
    msg["From"] = formataddr((SENDER_DISPLAY_NAME, sender))
    msg["To"] = message.recipient
    msg.set_content(message.body)
    return msg


class SmtpNotifier:
    """Sends plain-text mail; implicit TLS on port 465, STARTTLS otherwise.

    Errors from smtplib propagate to the caller unchanged.
    """

    def __init__(
        self,
        *,
        host: str,
        port: int,
        username: str,
        password: str,
        sender: str = "",
    ) -> None:
        if not host or not username or not password:
            raise ConfigurationError("SMTP_HOST, SMTP_USER and SMTP_PASS are required to send mail")
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._sender = sender or username

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpNotifier":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_user,
            password=settings.smtp_password,
            sender=settings.sender_address,
        )

    def send(self, message: EmailMessage) -> None:
        msg = build_mime_message(message, self._sender)
        context = ssl.create_default_context()
        if self._port == 465:
            with smtplib.SMTP_SSL(self._host, self._port, context=context, timeout=SMTP_TIMEOUT_SEC) as server:
                server.login(self._username, self._password)
                server.send_message(msg)
        else:
            with smtplib.SMTP(self._host, self._port, timeout=SMTP_TIMEOUT_SEC) as server:
                server.starttls(context=context)
                server.login(self._username, self._password)
                server.send_message(msg)
        logger.info("Sent %r to %s", message.subject, message.recipient)


class DryRunNotifier:
    """Logs the message instead of delivering it."""

    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []

    def send(self, message: EmailMessage) -> None:
        self.sent.append(message)
        logger.info(
            "[dry-run] To: %s\nSubject: %s\n%s",
            message.recipient,
            message.subject,
            message.body,
        )
