"""ORM model for saved export readiness reports."""

import uuid

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin

# Bump when the shape of the stored `result` document changes.
REPORT_SCHEMA_VERSION = 1


class ExportReport(Base, TimestampMixin):
    __tablename__ = "export_reports"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    product: Mapped[str] = mapped_column(Text, nullable=False)
    country: Mapped[str] = mapped_column(String(200), nullable=False)
    experience: Mapped[str] = mapped_column(String(50), nullable=False)
    hs_code: Mapped[str] = mapped_column(String(20), nullable=False)
    hs_description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    risk_level: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    incoterm: Mapped[str] = mapped_column(String(10), nullable=False, default="")
    journey_stage: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    result: Mapped[dict] = mapped_column(JSON, nullable=False)
    schema_version: Mapped[int] = mapped_column(
        Integer, nullable=False, default=REPORT_SCHEMA_VERSION
    )
