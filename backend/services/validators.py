from __future__ import annotations

import re

from backend.errors import (
    InvalidRecipientsError,
    MissingUploadError,
    PayloadTooLargeError,
    UnsupportedMediaError,
)
from backend.models.summary_model import UploadedDocument

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
TEXT_EXTENSIONS = (".txt", ".md")
PREVIEW_LENGTH = 500
PREVIEW_MARKER = "..."
DEFAULT_MAX_BYTES = 5 * 1024 * 1024


def is_text_upload(filename: str | None, content_type: str | None) -> bool:
    return content_type == "text/plain" or (filename or "").endswith(TEXT_EXTENSIONS)


def make_preview(content: str) -> str:
    if len(content) > PREVIEW_LENGTH:
        return content[:PREVIEW_LENGTH] + PREVIEW_MARKER
    return content


def validate_upload(
    filename: str | None,
    content_type: str | None,
    data: bytes | None,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> UploadedDocument:
    """Check an uploaded transcript and decode it.

    Only ``text/plain`` uploads or ``.txt``/``.md`` names are accepted, and the
    payload must not exceed ``max_bytes``.
    """
    if data is None or not filename:
        raise MissingUploadError()
    if not is_text_upload(filename, content_type):
        raise UnsupportedMediaError()
    if len(data) > max_bytes:
        raise PayloadTooLargeError(max_bytes // (1024 * 1024))

    content = data.decode("utf-8", errors="replace")
    return UploadedDocument(filename=filename, content=content, preview=make_preview(content))


def validate_email_list(raw: str) -> list[str]:
    """Split a comma separated recipient string; all-or-nothing.

    Raises ``InvalidRecipientsError`` listing every bad entry when any fails.
    """
    recipients = [item.strip() for item in raw.split(",")]
    invalid = [item for item in recipients if not EMAIL_PATTERN.match(item)]
    if invalid:
        raise InvalidRecipientsError(invalid)
    return recipients
