"""Soil advisor API routes."""
from fastapi import APIRouter, Request

from shared.logging import get_logger

from soil_advisor.api.schemas import AnalysisResult, ErrorResponse
from soil_advisor.errors import SoilAdvisorError

router = APIRouter(tags=["soil"])

logger = get_logger(__name__)


@router.post(
    "/analyze-soil",
    response_model=AnalysisResult,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def analyze_soil(request: Request) -> AnalysisResult:
    # Raw body: incomplete payloads are a 400 from the service, never a 422.
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    service = request.app.state.analysis_service
    try:
        return await service.analyze(payload)
    except SoilAdvisorError:
        raise
    except Exception as e:
        # Rendered by the SoilAdvisorError handler, inside the CORS and request-id middleware.
        logger.exception("soil_analysis_failed")
        raise SoilAdvisorError(str(e) or type(e).__name__) from e
