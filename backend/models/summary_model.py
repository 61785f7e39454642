from pydantic import BaseModel, ConfigDict, Field


class UploadedDocument(BaseModel):
    filename: str
    content: str
    preview: str


class SummaryRequest(BaseModel):
    # Presence is checked by the route so a missing field reports the envelope message.
    content: str | None = None
    prompt: str | None = None


class SummaryResult(BaseModel):
    summary: str = Field(min_length=1)


class EmailDistributionRequest(BaseModel):
    recipients: str | None = None
    summary: str | None = None
    subject: str = "Meeting Summary"


class DeliveryReceipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    recipient_count: int


class ErrorEnvelope(BaseModel):
    error: str


class UploadResponse(UploadedDocument):
    success: bool = True


class SummaryResponse(BaseModel):
    success: bool = True
    summary: str


class EmailResponse(BaseModel):
    success: bool = True
    message: str
    recipients: list[str]


class PromptTemplates(BaseModel):
    prompts: list[str]
