"""Pydantic schemas for saved export readiness reports."""

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, StringConstraints

from app.schemas.export_check import ExportReadinessResponse

# Blank or whitespace-only values are rejected like missing ones.
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class LockedHSCode(BaseModel):
    """The HS candidate the user picked from the three suggestions."""

    code: RequiredText
    description: str = ""


class ReportCreateRequest(BaseModel):
    product: RequiredText
    country: RequiredText
    experience: RequiredText
    result: ExportReadinessResponse
    locked_hs: LockedHSCode


class ReportCreatedResponse(BaseModel):
    ok: bool = True
    report_id: uuid.UUID


class ReportSummary(BaseModel):
    model_config = {"from_attributes": True}

    id: uuid.UUID
    product: str
    country: str
    experience: str
    hs_code: str
    hs_description: str
    risk_level: str
    incoterm: str
    journey_stage: str
    result: dict
    created_at: datetime


class ReportDetail(ReportSummary):
    user_id: str
    email: str | None = None
    schema_version: int
    updated_at: datetime | None = None


class ReportListResponse(BaseModel):
    ok: bool = True
    reports: list[ReportSummary]


class ReportDetailResponse(BaseModel):
    ok: bool = True
    report: ReportDetail


class ReportDeletedResponse(BaseModel):
    ok: bool = True
    deleted_id: uuid.UUID
