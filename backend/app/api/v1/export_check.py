"""Export readiness check endpoint."""

import logging

from fastapi import APIRouter, HTTPException

from app.errors import InvalidQuery
from app.readiness_engine.service import classify_export_readiness
from app.schemas.export_check import ExportCheckRequest, ExportReadinessResponse

logger = logging.getLogger("readiness.api")

router = APIRouter()


@router.post("", response_model=ExportReadinessResponse)
async def export_check(request: ExportCheckRequest) -> ExportReadinessResponse:
    """Classify a product for a destination and return the readiness checklist."""
    try:
        return classify_export_readiness(request.product, request.country, request.experience)
    except InvalidQuery as e:
        logger.info("Rejected export check: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
