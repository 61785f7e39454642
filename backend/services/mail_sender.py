from __future__ import annotations

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Any, Callable

from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from backend.config import Settings, get_settings
from backend.errors import InvalidRecipientsError, RelayError
from backend.models.summary_model import DeliveryReceipt
from backend.services.mail_composer import ComposedEmail, compose_email
from backend.utils.auth_aws import get_session

logger = logging.getLogger(__name__)


class MailSender:
    """Delivers a summary to a validated recipient list through one relay call.

    Delivery is all-or-nothing from the caller's point of view: a successful
    relay call counts as delivery to every recipient, a failed one raises a
    single ``RelayError``. The relay does not report per-recipient results.

    ``mail_backend="smtp"`` logs in to the SMTP relay as ``email_user``;
    ``mail_backend="ses"`` sends through Amazon SES with ``email_user`` as the
    verified source address.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        smtp_factory: Callable[..., Any] | None = None,
        ses_client: Any | None = None,
    ):
        self.settings = settings or get_settings()
        self._smtp_factory = smtp_factory or smtplib.SMTP
        self._ses_client = ses_client

    async def send_summary(
        self,
        recipients: list[str],
        summary: str,
        subject: str = "Meeting Summary",
    ) -> DeliveryReceipt:
        if not recipients:
            raise InvalidRecipientsError([], "At least one recipient is required")
        if not self.settings.email_user:
            raise RelayError("EMAIL_USER is not configured")

        composed = compose_email(summary)
        if self.settings.mail_backend == "ses":
            await asyncio.to_thread(self._send_ses, recipients, subject, composed)
        else:
            await asyncio.to_thread(self._send_smtp, recipients, subject, composed)

        logger.info("Sent summary via %s to %d recipient(s)", self.settings.mail_backend, len(recipients))
        return DeliveryReceipt(recipient_count=len(recipients))

    def _build_message(self, recipients: list[str], subject: str, composed: ComposedEmail) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.settings.email_user
        message["To"] = ", ".join(recipients)
        message["Subject"] = subject
        message.set_content(composed.text)
        message.add_alternative(composed.html, subtype="html")
        return message

    def _send_smtp(self, recipients: list[str], subject: str, composed: ComposedEmail) -> None:
        if not self.settings.email_pass:
            raise RelayError("EMAIL_PASS is not configured")

        message = self._build_message(recipients, subject, composed)
        try:
            with self._smtp_factory(
                self.settings.smtp_host,
                self.settings.smtp_port,
                timeout=self.settings.request_timeout_seconds,
            ) as smtp:
                if self.settings.smtp_use_tls:
                    smtp.starttls()
                smtp.login(self.settings.email_user, self.settings.email_pass)
                refused = smtp.send_message(message, to_addrs=recipients)
        except (smtplib.SMTPException, OSError) as exc:
            logger.exception("SMTP relay %s:%s failed", self.settings.smtp_host, self.settings.smtp_port)
            raise RelayError(str(exc)) from exc

        if refused:
            logger.warning("SMTP relay refused %d recipient(s): %s", len(refused), ", ".join(refused))

    def _ses(self) -> Any:
        if self._ses_client is None:
            timeout = self.settings.request_timeout_seconds
            self._ses_client = get_session(self.settings).client(
                "ses",
                region_name=self.settings.aws_region,
                config=Config(connect_timeout=timeout, read_timeout=timeout, retries={"total_max_attempts": 1}),
            )
        return self._ses_client

    def _send_ses(self, recipients: list[str], subject: str, composed: ComposedEmail) -> None:
        try:
            self._ses().send_email(
                Source=self.settings.email_user,
                Destination={"ToAddresses": recipients},
                Message={
                    "Subject": {"Data": subject, "Charset": "UTF-8"},
                    "Body": {
                        "Text": {"Data": composed.text, "Charset": "UTF-8"},
                        "Html": {"Data": composed.html, "Charset": "UTF-8"},
                    },
                },
            )
        except (BotoCoreError, ClientError) as exc:
            logger.exception("SES send_email failed")
            raise RelayError(str(exc)) from exc
