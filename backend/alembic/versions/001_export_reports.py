"""Export reports table

Revision ID: 001_export_reports
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_export_reports"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "export_reports",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", sa.String(100), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("product", sa.Text, nullable=False),
        sa.Column("country", sa.String(200), nullable=False),
        sa.Column("experience", sa.String(50), nullable=False),
        sa.Column("hs_code", sa.String(20), nullable=False),
        sa.Column("hs_description", sa.Text, nullable=False, server_default=""),
        sa.Column("risk_level", sa.String(20), nullable=False, server_default=""),
        sa.Column("incoterm", sa.String(10), nullable=False, server_default=""),
        sa.Column("journey_stage", sa.String(50), nullable=False, server_default=""),
        sa.Column("result", sa.JSON, nullable=False),
        sa.Column("schema_version", sa.Integer, nullable=False, server_default="1"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_export_reports_user_id", "export_reports", ["user_id"])
    op.create_index(
        "ix_export_reports_user_created", "export_reports", ["user_id", sa.text("created_at DESC")]
    )


def downgrade() -> None:
    op.drop_index("ix_export_reports_user_created", table_name="export_reports")
    op.drop_index("ix_export_reports_user_id", table_name="export_reports")
    op.drop_table("export_reports")
