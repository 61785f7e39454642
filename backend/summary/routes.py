from fastapi import APIRouter, Depends, File, UploadFile

from backend.models.summary_model import (
    ErrorEnvelope,
    PromptTemplates,
    SummaryRequest,
    SummaryResponse,
    UploadResponse,
)
from backend.services.prompt_builder import QUICK_PROMPTS

from .controller import SummaryController

router = APIRouter()
controller = SummaryController()

ERROR_RESPONSES = {400: {"model": ErrorEnvelope}, 500: {"model": ErrorEnvelope}}


def get_controller() -> SummaryController:
    return controller


@router.post("/upload", response_model=UploadResponse, responses=ERROR_RESPONSES)
async def upload_transcript(
    # a text field or a part without a filename arrives as str
    transcript: UploadFile | str | None = File(None),
    summaries: SummaryController = Depends(get_controller),
):
    return await summaries.upload(transcript)


@router.post("/generate-summary", response_model=SummaryResponse, responses=ERROR_RESPONSES)
async def generate_summary(
    payload: SummaryRequest,
    summaries: SummaryController = Depends(get_controller),
):
    return await summaries.generate_summary(payload)


@router.get("/prompts", response_model=PromptTemplates)
def list_prompts():
    return PromptTemplates(prompts=QUICK_PROMPTS)
