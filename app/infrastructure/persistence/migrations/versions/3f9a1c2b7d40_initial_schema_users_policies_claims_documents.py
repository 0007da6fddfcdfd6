"""initial_schema_users_policies_claims_documents

Revision ID: 3f9a1c2b7d40
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9a1c2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "app_user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_app_user_email"),
    )
    op.create_index("ix_app_user_updated_at", "app_user", ["updated_at"])

    op.create_table(
        "insurance_policy",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("policy_number", sa.String(), nullable=False),
        sa.Column("provider", sa.String(), nullable=False),
        sa.Column("insurance_type", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("coverage_amount", sa.Float(), nullable=False),
        sa.Column("premium", sa.Float(), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_insurance_policy_user_id", "insurance_policy", ["user_id"])
    op.create_index("ix_insurance_policy_updated_at", "insurance_policy", ["updated_at"])
    op.create_index(
        "ix_insurance_policy_user_updated", "insurance_policy", ["user_id", "updated_at"]
    )
    op.create_index(
        "ix_insurance_policy_user_number",
        "insurance_policy",
        ["user_id", "policy_number"],
        unique=True,
    )

    op.create_table(
        "claim",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("policy_id", sa.String(), nullable=False),
        sa.Column("claim_number", sa.String(), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("incident_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("damage_amount", sa.Float(), nullable=True),
        sa.Column("approved_amount", sa.Float(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["policy_id"], ["insurance_policy.id"], ondelete="CASCADE"
        ),
    )
    op.create_index("ix_claim_user_id", "claim", ["user_id"])
    op.create_index("ix_claim_policy_id", "claim", ["policy_id"])
    op.create_index("ix_claim_status", "claim", ["status"])
    op.create_index("ix_claim_updated_at", "claim", ["updated_at"])
    op.create_index("ix_claim_user_updated", "claim", ["user_id", "updated_at"])
    op.create_index(
        "ix_claim_user_number", "claim", ["user_id", "claim_number"], unique=True
    )

    op.create_table(
        "document",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("policy_id", sa.String(), nullable=True),
        sa.Column("claim_id", sa.String(), nullable=True),
        sa.Column("file_name", sa.String(), nullable=False),
        sa.Column("file_size", sa.BigInteger(), nullable=False),
        sa.Column("mime_type", sa.String(), nullable=False),
        sa.Column("document_type", sa.String(length=32), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "upload_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "is_analyzed", sa.Boolean(), nullable=False, server_default=sa.text("false")
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["policy_id"], ["insurance_policy.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(["claim_id"], ["claim.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_document_user_id", "document", ["user_id"])
    op.create_index("ix_document_policy_id", "document", ["policy_id"])
    op.create_index("ix_document_claim_id", "document", ["claim_id"])
    op.create_index("ix_document_document_type", "document", ["document_type"])
    op.create_index("ix_document_updated_at", "document", ["updated_at"])
    op.create_index("ix_document_user_updated", "document", ["user_id", "updated_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("document")
    op.drop_table("claim")
    op.drop_table("insurance_policy")
    op.drop_table("app_user")
