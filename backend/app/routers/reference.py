from fastapi import APIRouter, Depends, HTTPException

from app.schemas.common import ErrorResponse
from app.schemas.counter import ReferenceNumberResponse
from app.services.reference_service import ReferenceService
from app.utils.dependencies import get_reference_service
from app.utils.exceptions import InternalServerException
from app.utils.logger import app_logger

router = APIRouter(prefix="/api", tags=["reference"])

@router.post(
    "/reference",
    response_model=ReferenceNumberResponse,
    operation_id="generate_reference_number",
    summary="Generate the next reference number",
    description="""
    Increments the shared reference counter and returns it formatted as `NNN/MM/YYYY`.\n
    - The first number ever issued is `001`.\n
    - Month and year are taken from the server clock at the time of the request.
    """,
    responses={500: {"model": ErrorResponse}},
)
async def generate_reference_number(
    service: ReferenceService = Depends(get_reference_service),
):
    try:
        reference_number = await service.next_reference_number()
        return ReferenceNumberResponse(reference_number=reference_number)
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"Reference number generation failed: {str(e)}")
        raise InternalServerException("Error generating reference number")
