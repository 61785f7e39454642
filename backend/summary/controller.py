from __future__ import annotations

import logging

from fastapi import UploadFile

from backend.config import Settings, get_settings
from backend.errors import MissingUploadError, UnsupportedMediaError, ValidationError
from backend.models.summary_model import SummaryRequest, SummaryResponse, UploadResponse
from backend.services.completion_client import CompletionClient
from backend.services.validators import is_text_upload, validate_upload

logger = logging.getLogger(__name__)


class SummaryController:
    def __init__(self, completion_client: CompletionClient | None = None, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.completion_client = completion_client or CompletionClient(self.settings)

    async def upload(self, transcript: UploadFile | str | None) -> UploadResponse:
        if transcript is None or isinstance(transcript, str) or not transcript.filename:
            raise MissingUploadError()
        if not is_text_upload(transcript.filename, transcript.content_type):
            raise UnsupportedMediaError()

        # one byte past the limit is enough to know it is too large
        data = await transcript.read(self.settings.max_upload_bytes + 1)
        document = validate_upload(
            transcript.filename,
            transcript.content_type,
            data,
            max_bytes=self.settings.max_upload_bytes,
        )
        logger.info("Accepted upload %s chars=%d", document.filename, len(document.content))
        return UploadResponse(**document.model_dump())

    async def generate_summary(self, payload: SummaryRequest) -> SummaryResponse:
        if not payload.content or not payload.prompt:
            raise ValidationError("Content and prompt are required")
        result = await self.completion_client.generate_summary(payload.content, payload.prompt)
        return SummaryResponse(summary=result.summary)
