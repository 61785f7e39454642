from fastapi import APIRouter, Depends

from backend.models.summary_model import EmailDistributionRequest, EmailResponse, ErrorEnvelope

from .controller import DistributionController

router = APIRouter()
controller = DistributionController()


def get_controller() -> DistributionController:
    return controller


@router.post(
    "/send-email",
    response_model=EmailResponse,
    responses={400: {"model": ErrorEnvelope}, 500: {"model": ErrorEnvelope}},
)
async def send_email(
    payload: EmailDistributionRequest,
    distribution: DistributionController = Depends(get_controller),
):
    return await distribution.send_email(payload)
