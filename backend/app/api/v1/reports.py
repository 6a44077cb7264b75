"""Saved report endpoints: create, list, fetch and delete, scoped to the caller."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_current_user, get_db, get_report_service
from app.errors import NotFoundError, PersistenceError
from app.schemas.report import (
    ReportCreateRequest,
    ReportCreatedResponse,
    ReportDeletedResponse,
    ReportDetail,
    ReportDetailResponse,
    ReportListResponse,
    ReportSummary,
)
from app.services.identity import AuthenticatedUser
from app.services.report_service import ReportService

router = APIRouter()


@router.post("", response_model=ReportCreatedResponse, status_code=201)
async def create_report(
    request: ReportCreateRequest,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
    reports: ReportService = Depends(get_report_service),
) -> ReportCreatedResponse:
    try:
        report_id = await reports.save(db, user, request)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ReportCreatedResponse(report_id=report_id)


@router.get("", response_model=ReportListResponse)
async def list_reports(
    limit: int | None = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
    reports: ReportService = Depends(get_report_service),
) -> ReportListResponse:
    try:
        items = await reports.list_recent(db, user, limit=limit)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ReportListResponse(reports=[ReportSummary.model_validate(r) for r in items])


@router.get("/{report_id}", response_model=ReportDetailResponse)
async def get_report(
    report_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
    reports: ReportService = Depends(get_report_service),
) -> ReportDetailResponse:
    try:
        report = await reports.get(db, user, report_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ReportDetailResponse(report=ReportDetail.model_validate(report))


@router.delete("/{report_id}", response_model=ReportDeletedResponse)
async def delete_report(
    report_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user: AuthenticatedUser = Depends(get_current_user),
    reports: ReportService = Depends(get_report_service),
) -> ReportDeletedResponse:
    try:
        deleted_id = await reports.delete(db, user, report_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ReportDeletedResponse(deleted_id=deleted_id)
