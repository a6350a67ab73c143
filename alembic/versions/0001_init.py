"""init

Revision ID: 0001_init
Revises: 
Create Date: 2026-10-18 10:00:00
"""
import uuid
from datetime import datetime, timezone

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

DEFAULT_CATEGORIES = (
    ("Business Login", "Logins for business systems and portals"),
    ("Website Credential", "Accounts on external websites"),
    ("Employee Login", "Accounts issued to individual employees"),
    ("API Key", "Keys and tokens for third-party APIs"),
    ("Other", None),
)

JSON = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    employee_status = sa.Enum("Active", "Inactive", "On Leave", "Terminated", "Pending", name="employee_status")
    license_status = sa.Enum("Valid", "Expired", "Expiring Soon", "Renewal Pending", name="license_status")
    induction_status = sa.Enum("Completed", "Pending", "Expired", "In Progress", name="induction_status")
    credential_status = sa.Enum("active", "inactive", "expired", name="credential_status")
    password_strength = sa.Enum("weak", "medium", "strong", name="password_strength")
    task_priority = sa.Enum("low", "medium", "high", name="task_priority")
    task_status = sa.Enum("pending", "in_progress", "review", "completed", name="task_status")

    op.create_table(
        "employees",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("position", sa.String(length=100), nullable=True),
        sa.Column("department", sa.String(length=100), nullable=True),
        sa.Column("status", employee_status, nullable=False, server_default="Active"),
        sa.Column("hire_date", sa.Date(), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("email", name="uq_employees_email"),
    )
    op.create_index("ix_employees_email", "employees", ["email"])
    op.create_index("ix_employees_department", "employees", ["department"])

    op.create_table(
        "licenses",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("employee_id", sa.Uuid(), sa.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("license_number", sa.String(length=100), nullable=True),
        sa.Column("issuing_authority", sa.String(length=255), nullable=True),
        sa.Column("issue_date", sa.Date(), nullable=False),
        sa.Column("expiry_date", sa.Date(), nullable=False),
        sa.Column("status", license_status, nullable=False, server_default="Valid"),
        sa.Column("document_url", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_licenses_employee_id", "licenses", ["employee_id"])
    op.create_index("ix_licenses_expiry_date", "licenses", ["expiry_date"])

    op.create_table(
        "inductions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("employee_id", sa.Uuid(), sa.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("provider", sa.String(length=255), nullable=True),
        sa.Column("completed_date", sa.Date(), nullable=True),
        sa.Column("expiry_date", sa.Date(), nullable=True),
        sa.Column("status", induction_status, nullable=False, server_default="Pending"),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_inductions_employee_id", "inductions", ["employee_id"])
    op.create_index("ix_inductions_expiry_date", "inductions", ["expiry_date"])

    op.create_table(
        "employee_documents",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("employee_id", sa.Uuid(), sa.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=100), nullable=False),
        sa.Column("file_url", sa.Text(), nullable=False),
        sa.Column("upload_date", sa.Date(), nullable=False, server_default=sa.func.current_date()),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_employee_documents_employee_id", "employee_documents", ["employee_id"])

    op.create_table(
        "emergency_contacts",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("employee_id", sa.Uuid(), sa.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("relationship", sa.String(length=100), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("is_primary", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        *_timestamps(),
    )
    op.create_index("ix_emergency_contacts_employee_id", "emergency_contacts", ["employee_id"])
    op.create_index(
        "uq_emergency_contacts_one_primary",
        "emergency_contacts",
        ["employee_id"],
        unique=True,
        postgresql_where=sa.text("is_primary"),
    )

    op.create_table(
        "folders",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("parent_id", sa.Uuid(), sa.ForeignKey("folders.id", ondelete="CASCADE"), nullable=True),
        sa.Column("path", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_folders_parent_id", "folders", ["parent_id"])
    op.create_index("ix_folders_path", "folders", ["path"])

    op.create_table(
        "document_files",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("folder_id", sa.Uuid(), sa.ForeignKey("folders.id", ondelete="SET NULL"), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=100), nullable=False),
        sa.Column("file_url", sa.Text(), nullable=False),
        sa.Column("size", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("upload_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("uploaded_by", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_document_files_folder_id", "document_files", ["folder_id"])

    op.create_table(
        "credentials",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_encrypted", sa.Text(), nullable=False),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("tags", JSON, nullable=True),
        sa.Column("expiration_date", sa.Date(), nullable=True),
        sa.Column("status", credential_status, nullable=False, server_default="active"),
        sa.Column("strength", password_strength, nullable=False),
        sa.Column("created_by", sa.String(length=255), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_credentials_category", "credentials", ["category"])

    categories = op.create_table(
        "credential_categories",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("name", name="uq_credential_categories_name"),
    )

    op.create_table(
        "tasks",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("employee_id", sa.Uuid(), sa.ForeignKey("employees.id", ondelete="SET NULL"), nullable=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("priority", task_priority, nullable=False, server_default="medium"),
        sa.Column("status", task_status, nullable=False, server_default="pending"),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_tasks_employee_id", "tasks", ["employee_id"])
    op.create_index("ix_tasks_status", "tasks", ["status"])

    op.create_table(
        "activity_log",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("actor", sa.String(length=255), nullable=True),
        sa.Column("action", sa.String(length=64), nullable=False),
        sa.Column("entity_type", sa.String(length=64), nullable=False),
        sa.Column("entity_id", sa.String(length=64), nullable=True),
        sa.Column("ts", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("details", JSON, nullable=True),
    )
    op.create_index("ix_activity_log_actor", "activity_log", ["actor"])

    now = datetime.now(timezone.utc)
    op.bulk_insert(
        categories,
        [
            {"id": uuid.uuid4(), "name": name, "description": description, "created_at": now}
            for name, description in DEFAULT_CATEGORIES
        ],
    )


def downgrade() -> None:
    op.drop_table("activity_log")
    op.drop_table("tasks")
    op.drop_table("credential_categories")
    op.drop_table("credentials")
    op.drop_table("document_files")
    op.drop_table("folders")
    op.drop_index("uq_emergency_contacts_one_primary", table_name="emergency_contacts")
    op.drop_table("emergency_contacts")
    op.drop_table("employee_documents")
    op.drop_table("inductions")
    op.drop_table("licenses")
    op.drop_table("employees")

    bind = op.get_bind()
    for name in (
        "task_status",
        "task_priority",
        "password_strength",
        "credential_status",
        "induction_status",
        "license_status",
        "employee_status",
    ):
        sa.Enum(name=name).drop(bind, checkfirst=True)
