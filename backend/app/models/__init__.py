from app.models.base import Base, TimestampMixin
from app.models.report import REPORT_SCHEMA_VERSION, ExportReport

__all__ = [
    "Base",
    "TimestampMixin",
    "ExportReport",
    "REPORT_SCHEMA_VERSION",
]
