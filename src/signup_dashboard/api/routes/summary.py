"""Summary API endpoint.

GET /api/summary - Current signup summary (cached for the TTL window)
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from signup_dashboard.aggregation.cache import SummaryService
from signup_dashboard.api.app import get_summary_service
from signup_dashboard.models.types import ErrorResponse, Summary

logger = logging.getLogger(__name__)

router = APIRouter()

LOAD_FAILURE_MESSAGE = "Failed to load sheet data"


@router.get(
    "/summary",
    response_model=Summary,
    responses={500: {"model": ErrorResponse}},
)
def get_summary(
    service: SummaryService = Depends(get_summary_service),
):
    """Get the signup summary.

    Args:
        service: Summary service (injected).

    Returns:
        Summary, or a 500 ErrorResponse if the sheet could not be read.
        Upstream details are logged, never returned.
    """
    try:
        return service.get_summary()
    except Exception:
        logger.exception(LOAD_FAILURE_MESSAGE)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=LOAD_FAILURE_MESSAGE).model_dump(),
        )
