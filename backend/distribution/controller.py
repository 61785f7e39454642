from __future__ import annotations

from backend.config import Settings, get_settings
from backend.errors import ValidationError
from backend.models.summary_model import EmailDistributionRequest, EmailResponse
from backend.services.mail_sender import MailSender
from backend.services.validators import validate_email_list


class DistributionController:
    def __init__(self, mail_sender: MailSender | None = None, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.mail_sender = mail_sender or MailSender(self.settings)

    async def send_email(self, payload: EmailDistributionRequest) -> EmailResponse:
        if not payload.recipients or not payload.summary:
            raise ValidationError("Recipients and summary are required")

        recipients = validate_email_list(payload.recipients)
        receipt = await self.mail_sender.send_summary(recipients, payload.summary, payload.subject)
        return EmailResponse(
            message=f"Summary sent successfully to {receipt.recipient_count} recipient(s)",
            recipients=recipients,
        )
