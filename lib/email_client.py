# =============================================================================
# lib/email_client.py - Transactional Email Client (Resend)
# =============================================================================
# Thin wrapper around the Resend HTTP API. Accepts a rendered email
# (recipient, subject, HTML body, text body) and returns the provider's
# message id.
#
# When RESEND_API_KEY is not configured the email is written to the log
# instead and the send is reported as a success in "development" mode.
#
# Usage:
#   from lib.email_client import EmailClient
#   result = EmailClient.send(to="jane@example.com", subject=..., html=..., text=...)
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from app.config import settings

logger = logging.getLogger(__name__)

DEVELOPMENT_MODE = "development"
LOG_RULE = "=" * 80


class EmailSendError(Exception):
    """
    The email provider rejected the message or could not be reached.

    `details` carries the provider's error payload when there is one.
    """

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


@dataclass
class SendResult:
    """Outcome of EmailClient.send()."""
    email_id: str | None = None
    mode: str | None = None

    @property
    def is_development(self) -> bool:
        return self.mode == DEVELOPMENT_MODE


class EmailClient:
    """
    Sends transactional email through Resend.

    All methods are class methods, mirroring SupabaseClient.
    """

    @classmethod
    def send(cls, to: str, subject: str, html: str, text: str) -> SendResult:
        """
        Send one email.

        Args:
            to: Recipient address
            subject: Subject line
            html: HTML body
            text: Plain text body

        Returns:
            SendResult with the provider's id, or mode="development" when
            no provider is configured

        Raises:
            EmailSendError: If the provider returns an error or is unreachable
        """
        if not settings.email_enabled:
            cls._log_email(to, subject, text)
            return SendResult(mode=DEVELOPMENT_MODE)

        payload = {
            "from": settings.EMAIL_FROM,
            "to": [to],
            "subject": subject,
            "html": html,
            "text": text,
        }
        headers = {"Authorization": f"Bearer {settings.RESEND_API_KEY}"}

        try:
            response = httpx.post(
                settings.RESEND_API_URL,
                json=payload,
                headers=headers,
                timeout=settings.EMAIL_TIMEOUT_SECONDS,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Email provider unreachable: {e}")
            raise EmailSendError("Failed to send email", details=str(e))

        if response.is_error:
            details = cls._error_payload(response)
            logger.error(f"Resend error: {details}")
            raise EmailSendError("Failed to send email", details=details)

        email_id = cls._email_id(response)
        logger.info(f"Sent email {email_id} to {to}")
        return SendResult(email_id=email_id)

    @staticmethod
    def _email_id(response: httpx.Response) -> str | None:
        """Provider message id from a success body; None if the body is unreadable."""
        try:
            body = response.json()
        except ValueError:
            logger.warning(f"Resend returned an unreadable success body: {response.text!r}")
            return None
        return body.get("id") if isinstance(body, dict) else None

    @staticmethod
    def _error_payload(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return {"status_code": response.status_code, "body": response.text}

    @staticmethod
    def _log_email(to: str, subject: str, text: str) -> None:
        """Write the would-be email to the log for local development."""
        logger.info(
            "\n".join([
                LOG_RULE,
                "EMAIL (Email service not configured)",
                LOG_RULE,
                f"To: {to}",
                f"Subject: {subject}",
                "-" * 80,
                text,
                LOG_RULE,
            ])
        )
