from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr
from typing import Protocol, Sequence

from ..core.constants import MAIL_FROM_NAME
from ..core.exceptions import NotificationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailConfig:
    host: str
    port: int
    username: str
    password: str
    from_email: str
    from_name: str = MAIL_FROM_NAME

    @classmethod
    def from_dict(cls, mail_config: dict) -> "MailConfig":
        username = str(mail_config.get("username") or "")
        return cls(
            host=str(mail_config.get("host") or ""),
            port=int(mail_config.get("port") or 587),
            username=username,
            password=str(mail_config.get("password") or ""),
            from_email=str(mail_config.get("from_email") or username),
            from_name=str(mail_config.get("from_name") or MAIL_FROM_NAME),
        )

    def is_configured(self) -> bool:
        return all([self.host, self.port, self.username, self.password, self.from_email])


class Mailer(Protocol):
    def send(self, *, to: Sequence[str], subject: str, text: str) -> None:
        raise NotImplementedError


class SmtpMailer(Mailer):
    """Plain-text mail over SMTP with STARTTLS."""

    def __init__(self, config: MailConfig, *, timeout: float = 30.0):
        self._config = config
        self._timeout = timeout

    def send(self, *, to: Sequence[str], subject: str, text: str) -> None:
        if not self._config.is_configured():
            logger.warning("Email service not configured, cannot send %r", subject)
            raise NotificationError("Email service not configured")

        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = formataddr((self._config.from_name, self._config.from_email))
        msg["To"] = ", ".join(to)
        msg.set_content(text)

        try:
            with smtplib.SMTP(self._config.host, self._config.port, timeout=self._timeout) as server:
                server.starttls()
                server.login(self._config.username, self._config.password)
                server.send_message(msg, to_addrs=list(to))
        except smtplib.SMTPAuthenticationError as e:
            logger.error("SMTP authentication failed for %s", self._config.username)
            raise NotificationError("SMTP authentication failed") from e
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send %r: %s", subject, e)
            raise NotificationError(f"Failed to send email: {e}") from e

        logger.info("Sent %r to %d recipient(s)", subject, len(to))
