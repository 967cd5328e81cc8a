"""Initial schema: firms, clients, programs, applications, workflow, documents, messaging, activity log

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-18 09:12:41.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

APPLICATION_STATUSES = (
    "draft",
    "started",
    "submitted",
    "ready_for_submission",
    "submitted_to_government",
    "under_review",
    "approved",
    "rejected",
    "archived",
)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def _updated_at() -> sa.Column:
    return sa.Column(
        "updated_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("now()"),
        nullable=False,
    )


def _firm_id() -> sa.Column:
    return sa.Column(
        "firm_id",
        sa.String(),
        sa.ForeignKey("firm.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


def upgrade() -> None:
    """Create initial schema.

    Application-owned tables reference application.id without ON DELETE so
    that removal goes through the ordered deletion cascade.
    """
    op.create_table(
        "firm",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "app_user",
        sa.Column("id", sa.String(), primary_key=True),
        _firm_id(),
        sa.Column("email", sa.String(), nullable=False, unique=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("role", sa.String(16), server_default=sa.text("'advisor'"), nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        _created_at(),
        _updated_at(),
        sa.CheckConstraint("role IN ('admin', 'advisor', 'junior')", name="app_user_role_check"),
    )

    op.create_table(
        "client",
        sa.Column("id", sa.String(), primary_key=True),
        _firm_id(),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False, index=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "crbi_program",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("country_code", sa.String(2), nullable=False),
        sa.Column("country_name", sa.String(), nullable=False),
        sa.Column("program_type", sa.String(32), nullable=False),
        sa.Column("program_name", sa.String(), nullable=False),
        sa.Column("min_investment", sa.Numeric(14, 2), nullable=False),
        sa.Column("processing_time_months", sa.Integer(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    statuses = ", ".join(f"'{s}'" for s in APPLICATION_STATUSES)
    op.create_table(
        "application",
        sa.Column("id", sa.String(), primary_key=True),
        _firm_id(),
        sa.Column("client_id", sa.String(), sa.ForeignKey("client.id"), nullable=False, index=True),
        sa.Column(
            "program_id", sa.String(), sa.ForeignKey("crbi_program.id"), nullable=False, index=True
        ),
        sa.Column(
            "assigned_advisor_id",
            sa.String(),
            sa.ForeignKey("app_user.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        sa.Column("application_number", sa.String(), nullable=False, unique=True),
        sa.Column("status", sa.String(32), server_default=sa.text("'draft'"), nullable=False),
        sa.Column("priority", sa.String(16), server_default=sa.text("'medium'"), nullable=False),
        sa.Column("investment_amount", sa.Numeric(14, 2), nullable=True),
        sa.Column("investment_type", sa.String(), nullable=True),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("decision_expected_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("decided_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("internal_notes", sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
        sa.CheckConstraint(f"status IN ({statuses})", name="application_status_check"),
    )
    op.create_index("ix_application_firm_status", "application", ["firm_id", "status"])

    op.create_table(
        "workflow_template",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "program_id",
            sa.String(),
            sa.ForeignKey("crbi_program.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("template_name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("total_stages", sa.Integer(), nullable=False),
        sa.Column("estimated_time_months", sa.Integer(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("version", sa.Integer(), server_default=sa.text("1"), nullable=False),
        _created_at(),
        _updated_at(),
        sa.UniqueConstraint("program_id", "version", name="uq_workflow_template_program_version"),
    )

    op.create_table(
        "workflow_stage",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "template_id",
            sa.String(),
            sa.ForeignKey("workflow_template.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("stage_order", sa.Integer(), nullable=False),
        sa.Column("stage_name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("estimated_days", sa.Integer(), nullable=True),
        sa.Column("is_required", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("can_skip", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("auto_progress", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        _created_at(),
        _updated_at(),
        sa.UniqueConstraint("template_id", "stage_order", name="uq_workflow_stage_template_order"),
    )

    op.create_table(
        "document_requirement",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "stage_id",
            sa.String(),
            sa.ForeignKey("workflow_stage.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("document_name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(64), nullable=True),
        sa.Column("is_required", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("sort_order", sa.Integer(), server_default=sa.text("0"), nullable=False),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "custom_document_requirement",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "application_id", sa.String(), sa.ForeignKey("application.id"), nullable=False, index=True
        ),
        sa.Column(
            "stage_id",
            sa.String(),
            sa.ForeignKey("workflow_stage.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("document_name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_required", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column(
            "created_by_id",
            sa.String(),
            sa.ForeignKey("app_user.id", ondelete="SET NULL"),
            nullable=True,
        ),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "application_document",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "application_id", sa.String(), sa.ForeignKey("application.id"), nullable=False, index=True
        ),
        sa.Column(
            "document_requirement_id",
            sa.String(),
            sa.ForeignKey("document_requirement.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        sa.Column(
            "custom_requirement_id",
            sa.String(),
            sa.ForeignKey("custom_document_requirement.id"),
            nullable=True,
        ),
        sa.Column("filename", sa.String(), nullable=False),
        sa.Column("file_path", sa.String(), nullable=True),
        sa.Column("file_size", sa.BigInteger(), nullable=True),
        sa.Column("mime_type", sa.String(128), nullable=True),
        sa.Column("status", sa.String(32), server_default=sa.text("'uploaded'"), nullable=False),
        sa.Column(
            "uploaded_by_id",
            sa.String(),
            sa.ForeignKey("app_user.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column(
            "uploaded_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "document_review",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "document_id", sa.String(), sa.ForeignKey("application_document.id"), nullable=False
        ),
        sa.Column(
            "reviewer_id",
            sa.String(),
            sa.ForeignKey("app_user.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("comments", sa.Text(), nullable=True),
        sa.Column(
            "reviewed_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        _created_at(),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected', 'needs_clarification')",
            name="document_review_status_check",
        ),
    )
    op.create_index(
        "ix_document_review_document_reviewed", "document_review", ["document_id", "reviewed_at"]
    )

    op.create_table(
        "original_document",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "application_id", sa.String(), sa.ForeignKey("application.id"), nullable=False, index=True
        ),
        sa.Column("document_name", sa.String(), nullable=False),
        sa.Column("status", sa.String(32), server_default=sa.text("'requested'"), nullable=False),
        sa.Column("courier", sa.String(), nullable=True),
        sa.Column("tracking_number", sa.String(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "stage_progress",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "application_id", sa.String(), sa.ForeignKey("application.id"), nullable=False, index=True
        ),
        sa.Column(
            "stage_id",
            sa.String(),
            sa.ForeignKey("workflow_stage.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("status", sa.String(32), server_default=sa.text("'pending'"), nullable=False),
        sa.Column("progress", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        _updated_at(),
        sa.UniqueConstraint(
            "application_id", "stage_id", name="uq_stage_progress_application_stage"
        ),
    )

    op.create_table(
        "application_workflow_progress",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "application_id", sa.String(), sa.ForeignKey("application.id"), nullable=False, index=True
        ),
        sa.Column(
            "template_id",
            sa.String(),
            sa.ForeignKey("workflow_template.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "current_stage_id",
            sa.String(),
            sa.ForeignKey("workflow_stage.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("overall_progress", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("status", sa.String(32), server_default=sa.text("'not_started'"), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        _updated_at(),
        sa.UniqueConstraint(
            "application_id", "template_id", name="uq_workflow_progress_application_template"
        ),
    )

    op.create_table(
        "task",
        sa.Column("id", sa.String(), primary_key=True),
        _firm_id(),
        sa.Column(
            "application_id", sa.String(), sa.ForeignKey("application.id"), nullable=True, index=True
        ),
        sa.Column(
            "client_id", sa.String(), sa.ForeignKey("client.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column(
            "created_by_id",
            sa.String(),
            sa.ForeignKey("app_user.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column(
            "assigned_to_id",
            sa.String(),
            sa.ForeignKey("app_user.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("priority", sa.String(16), server_default=sa.text("'medium'"), nullable=False),
        sa.Column("status", sa.String(32), server_default=sa.text("'pending'"), nullable=False),
        sa.Column("task_type", sa.String(64), nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        _updated_at(),
    )
    op.create_index("ix_task_application_status", "task", ["application_id", "status"])

    op.create_table(
        "communication",
        sa.Column("id", sa.String(), primary_key=True),
        _firm_id(),
        sa.Column(
            "client_id",
            sa.String(),
            sa.ForeignKey("client.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "application_id", sa.String(), sa.ForeignKey("application.id"), nullable=True, index=True
        ),
        sa.Column(
            "user_id", sa.String(), sa.ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("subject", sa.String(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("direction", sa.String(16), nullable=False),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "conversation",
        sa.Column("id", sa.String(), primary_key=True),
        _firm_id(),
        sa.Column(
            "application_id", sa.String(), sa.ForeignKey("application.id"), nullable=True, index=True
        ),
        sa.Column("subject", sa.String(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "message",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "conversation_id",
            sa.String(),
            sa.ForeignKey("conversation.id"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "sender_id", sa.String(), sa.ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("content", sa.Text(), nullable=False),
        _created_at(),
    )

    op.create_table(
        "message_participant",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "conversation_id",
            sa.String(),
            sa.ForeignKey("conversation.id"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "user_id", sa.String(), sa.ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
        ),
        _created_at(),
        sa.UniqueConstraint("conversation_id", "user_id", name="uq_message_participant"),
    )

    op.create_table(
        "message_notification",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "message_id", sa.String(), sa.ForeignKey("message.id"), nullable=False, index=True
        ),
        sa.Column(
            "recipient_id",
            sa.String(),
            sa.ForeignKey("app_user.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("is_read", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        _created_at(),
    )

    op.create_table(
        "activity_log",
        sa.Column("id", sa.String(), primary_key=True),
        _firm_id(),
        sa.Column(
            "user_id", sa.String(), sa.ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column(
            "client_id", sa.String(), sa.ForeignKey("client.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("application_id", sa.String(), sa.ForeignKey("application.id"), nullable=True),
        sa.Column("action", sa.String(64), nullable=False),
        sa.Column("entity_type", sa.String(64), nullable=False),
        sa.Column("entity_id", sa.String(), nullable=False),
        sa.Column("old_values", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("new_values", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("ip_address", sa.String(), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.Column("correlation_id", sa.String(), nullable=True),
        _created_at(),
    )
    op.create_index(
        "ix_activity_log_application_action",
        "activity_log",
        ["application_id", "action", "created_at"],
    )


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    for table in (
        "activity_log",
        "message_notification",
        "message_participant",
        "message",
        "conversation",
        "communication",
        "task",
        "application_workflow_progress",
        "stage_progress",
        "original_document",
        "document_review",
        "application_document",
        "custom_document_requirement",
        "document_requirement",
        "workflow_stage",
        "workflow_template",
        "application",
        "crbi_program",
        "client",
        "app_user",
        "firm",
    ):
        op.drop_table(table)
