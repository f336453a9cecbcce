"""create courts, cases, hearings and display_board_cache tables

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 10:00:00
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "courts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("court_name", sa.String(length=255), nullable=False),
        sa.Column(
            "display_board_url",
            sa.Text(),
            nullable=True,
            comment="Public 'now showing' page for this court",
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_courts_court_name", "courts", ["court_name"], unique=False)

    op.create_table(
        "cases",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("court_id", sa.Integer(), nullable=False),
        sa.Column("case_number", sa.String(length=120), nullable=False),
        sa.Column("case_title", sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["court_id"], ["courts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_cases_court_id", "cases", ["court_id"], unique=False)
    op.create_index("ix_cases_case_number", "cases", ["case_number"], unique=False)

    op.create_table(
        "hearings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("case_id", sa.Integer(), nullable=False),
        sa.Column("hearing_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "court_number",
            sa.String(length=32),
            nullable=True,
            comment="Court room / bench number, digits only",
        ),
        sa.Column(
            "court_item_number",
            sa.String(length=32),
            nullable=True,
            comment="Serial position in the day's cause list",
        ),
        sa.Column(
            "status",
            sa.String(length=32),
            nullable=False,
            comment="SCHEDULED, IN_PROGRESS, COMPLETED, ADJOURNED, CANCELLED",
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["case_id"], ["cases.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_hearings_case_id", "hearings", ["case_id"], unique=False)
    op.create_index("ix_hearings_hearing_date", "hearings", ["hearing_date"], unique=False)
    op.create_index(
        "ix_hearings_court_number_item_status",
        "hearings",
        ["court_number", "court_item_number", "status"],
        unique=False,
    )

    op.create_table(
        "display_board_cache",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("court_id", sa.Integer(), nullable=False),
        sa.Column("court_number", sa.String(length=32), nullable=False),
        sa.Column("item_number", sa.String(length=32), nullable=True),
        sa.Column("case_number", sa.String(length=120), nullable=True),
        sa.Column("case_title", sa.Text(), nullable=True),
        sa.Column("judge_name", sa.String(length=500), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False, comment="IN_PROGRESS, WAITING"),
        sa.Column("last_updated", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["court_id"], ["courts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "court_id",
            "court_number",
            name="uq_display_board_cache_court_id_court_number",
        ),
    )


def downgrade() -> None:
    op.drop_table("display_board_cache")
    op.drop_index("ix_hearings_court_number_item_status", table_name="hearings")
    op.drop_index("ix_hearings_hearing_date", table_name="hearings")
    op.drop_index("ix_hearings_case_id", table_name="hearings")
    op.drop_table("hearings")
    op.drop_index("ix_cases_case_number", table_name="cases")
    op.drop_index("ix_cases_court_id", table_name="cases")
    op.drop_table("cases")
    op.drop_index("ix_courts_court_name", table_name="courts")
    op.drop_table("courts")
