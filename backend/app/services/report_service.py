"""Persistence for saved export readiness reports.

Every read and delete is scoped to the calling user; a report owned by
someone else is indistinguishable from a missing one.
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.errors import NotFoundError, PersistenceError
from app.models.report import REPORT_SCHEMA_VERSION, ExportReport
from app.schemas.report import ReportCreateRequest
from app.services.identity import AuthenticatedUser

logger = logging.getLogger("readiness.reports")


class ReportService:
    """Save, list, fetch and delete reports for an authenticated user."""

    def __init__(self, settings: Settings):
        self.list_limit = settings.reports_list_limit

    async def save(
        self,
        db: AsyncSession,
        user: AuthenticatedUser,
        request: ReportCreateRequest,
    ) -> uuid.UUID:
        """Persist a finalized report. Returns the new report id."""
        result = request.result
        report = ExportReport(
            id=uuid.uuid4(),
            user_id=user.user_id,
            email=user.email,
            product=request.product,
            country=request.country,
            experience=request.experience,
            hs_code=request.locked_hs.code,
            hs_description=request.locked_hs.description or "",
            risk_level=result.risk_level.value,
            incoterm=result.recommended_incoterm,
            journey_stage=result.journey_stage,
            result=result.model_dump(mode="json"),
            schema_version=REPORT_SCHEMA_VERSION,
        )
        try:
            db.add(report)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to save report for user %s: %s", user.user_id, e)
            raise PersistenceError("Failed to save report") from e

        logger.info("Saved report %s for user %s", report.id, user.user_id)
        return report.id

    async def list_recent(
        self,
        db: AsyncSession,
        user: AuthenticatedUser,
        limit: int | None = None,
    ) -> list[ExportReport]:
        """Newest-first reports for the user, capped at the configured limit."""
        effective_limit = min(limit or self.list_limit, self.list_limit)
        try:
            result = await db.execute(
                select(ExportReport)
                .where(ExportReport.user_id == user.user_id)
                .order_by(ExportReport.created_at.desc())
                .limit(effective_limit)
            )
        except SQLAlchemyError as e:
            logger.error("Failed to list reports for user %s: %s", user.user_id, e)
            raise PersistenceError("Failed to list reports") from e
        return list(result.scalars().all())

    async def get(
        self,
        db: AsyncSession,
        user: AuthenticatedUser,
        report_id: uuid.UUID,
    ) -> ExportReport:
        try:
            result = await db.execute(
                select(ExportReport).where(
                    ExportReport.id == report_id,
                    ExportReport.user_id == user.user_id,
                )
            )
        except SQLAlchemyError as e:
            logger.error("Failed to load report %s: %s", report_id, e)
            raise PersistenceError("Failed to load report") from e

        report = result.scalar_one_or_none()
        if report is None:
            raise NotFoundError("Report not found")
        return report

    async def delete(
        self,
        db: AsyncSession,
        user: AuthenticatedUser,
        report_id: uuid.UUID,
    ) -> uuid.UUID:
        """Delete a report owned by the user. Returns the deleted id."""
        report = await self.get(db, user, report_id)
        try:
            await db.delete(report)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to delete report %s: %s", report_id, e)
            raise PersistenceError("Failed to delete report") from e

        logger.info("Deleted report %s for user %s", report_id, user.user_id)
        return report_id
