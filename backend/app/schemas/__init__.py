from app.schemas.export_check import ExportCheckRequest, ExportReadinessResponse
from app.schemas.health import HealthResponse
from app.schemas.report import (
    ReportCreateRequest,
    ReportCreatedResponse,
    ReportDeletedResponse,
    ReportDetailResponse,
    ReportListResponse,
)

__all__ = [
    "ExportCheckRequest",
    "ExportReadinessResponse",
    "HealthResponse",
    "ReportCreateRequest",
    "ReportCreatedResponse",
    "ReportDeletedResponse",
    "ReportDetailResponse",
    "ReportListResponse",
]
