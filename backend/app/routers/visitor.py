from fastapi import APIRouter, Depends, HTTPException

from app.schemas.common import ErrorResponse
from app.schemas.counter import VisitorCountResponse
from app.services.visitor_service import VisitorService
from app.utils.dependencies import get_visitor_service
from app.utils.exceptions import InternalServerException
from app.utils.logger import app_logger

router = APIRouter(prefix="/api", tags=["visitors"])

@router.get(
    "/visitorCount",
    response_model=VisitorCountResponse,
    operation_id="get_visitor_count",
    summary="Current visitor count",
    description="Returns the visitor count. The count grows by one on the first request after each elapsed hour.",
    responses={500: {"model": ErrorResponse}},
)
async def get_visitor_count(service: VisitorService = Depends(get_visitor_service)):
    try:
        count = await service.current_count()
        return VisitorCountResponse(visitor_count=count)
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"Visitor count lookup failed: {str(e)}")
        raise InternalServerException("Error fetching visitor count")
