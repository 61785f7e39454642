from __future__ import annotations


class AppError(Exception):
    """Base class for errors rendered as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = 400


class MissingUploadError(ValidationError):
    def __init__(self, message: str = "No file uploaded"):
        super().__init__(message)


class EmptyContentError(ValidationError):
    def __init__(self, message: str = "Content is required"):
        super().__init__(message)


class EmptyInstructionError(ValidationError):
    def __init__(self, message: str = "Prompt is required"):
        super().__init__(message)


class InvalidRecipientsError(ValidationError):
    """Raised with every recipient that failed the address check, in input order."""

    def __init__(self, invalid: list[str], message: str | None = None):
        super().__init__(message or f"Invalid email addresses: {', '.join(invalid)}")
        self.invalid = invalid


class UnsupportedMediaError(AppError):
    status_code = 400

    def __init__(self, message: str = "Only text files are allowed"):
        super().__init__(message)


class PayloadTooLargeError(AppError):
    status_code = 400

    def __init__(self, max_mb: int = 5):
        super().__init__(f"File too large. Maximum size is {max_mb}MB.")
        self.max_mb = max_mb


class ProviderError(AppError):
    """Completion provider failed; ``detail`` is the provider's own message."""

    def __init__(self, detail: str):
        super().__init__(f"Error generating summary: {detail}")
        self.detail = detail


class EmptyCompletionError(ProviderError):
    def __init__(self):
        super().__init__("No summary generated")


class RelayError(AppError):
    """Mail relay failed; the whole delivery is considered failed."""

    def __init__(self, detail: str):
        super().__init__(f"Error sending email: {detail}")
        self.detail = detail


class NotFoundError(AppError):
    status_code = 404

    def __init__(self, message: str = "Route not found"):
        super().__init__(message)


class InternalError(AppError):
    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
