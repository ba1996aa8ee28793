"""create checklist tables

Revision ID: 5c1e9a7d3b20
Revises:
Create Date: 2026-10-17 09:12:44.108532

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1e9a7d3b20"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "login",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("mode", sa.Integer(), server_default="0", nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_login_id"), "login", ["id"], unique=False)
    op.create_index(op.f("ix_login_username"), "login", ["username"], unique=True)

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("jancode", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=500), nullable=False),
        sa.Column("dateline", sa.String(length=64), nullable=True),
        sa.Column("date_discount", sa.Integer(), nullable=False),
        sa.Column("date_recall", sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_products_id"), "products", ["id"], unique=False)
    op.create_index(op.f("ix_products_jancode"), "products", ["jancode"], unique=True)

    op.create_table(
        "custom_products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("jancode", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=500), nullable=False),
        sa.Column("dateline", sa.String(length=64), nullable=True),
        sa.Column("date_discount", sa.Integer(), nullable=False),
        sa.Column("date_recall", sa.Integer(), nullable=False),
        sa.Column("user", sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_custom_products_id"), "custom_products", ["id"], unique=False)
    op.create_index(
        op.f("ix_custom_products_jancode"), "custom_products", ["jancode"], unique=False
    )
    op.create_index(op.f("ix_custom_products_user"), "custom_products", ["user"], unique=False)

    # checklist_id is max + 1 at creation time and intentionally not unique
    op.create_table(
        "checklists",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("checklist_id", sa.Integer(), nullable=False),
        sa.Column("checklist_name", sa.String(length=255), nullable=False),
        sa.Column("date_create", sa.Date(), nullable=False),
        sa.Column("status", sa.Integer(), nullable=False),
        sa.Column("user", sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_checklists_checklist_id"), "checklists", ["checklist_id"])
    op.create_index(op.f("ix_checklists_date_create"), "checklists", ["date_create"])
    op.create_index(op.f("ix_checklists_user"), "checklists", ["user"])

    op.create_table(
        "checklist_detail",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("checklist_id", sa.Integer(), nullable=False),
        sa.Column("jancode", sa.String(length=64), nullable=False),
        sa.Column("dateline", sa.String(length=64), nullable=True),
        sa.Column("datetime", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(op.f("ix_checklist_detail_checklist_id"), "checklist_detail", ["checklist_id"])
    op.create_index(op.f("ix_checklist_detail_jancode"), "checklist_detail", ["jancode"])

    op.create_table(
        "settings_ocr",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("value", sa.String(), nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_settings_ocr_id"), "settings_ocr", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_settings_ocr_id"), table_name="settings_ocr")
    op.drop_table("settings_ocr")
    op.drop_index(op.f("ix_checklist_detail_jancode"), table_name="checklist_detail")
    op.drop_index(op.f("ix_checklist_detail_checklist_id"), table_name="checklist_detail")
    op.drop_table("checklist_detail")
    op.drop_index(op.f("ix_checklists_user"), table_name="checklists")
    op.drop_index(op.f("ix_checklists_date_create"), table_name="checklists")
    op.drop_index(op.f("ix_checklists_checklist_id"), table_name="checklists")
    op.drop_table("checklists")
    op.drop_index(op.f("ix_custom_products_user"), table_name="custom_products")
    op.drop_index(op.f("ix_custom_products_jancode"), table_name="custom_products")
    op.drop_index(op.f("ix_custom_products_id"), table_name="custom_products")
    op.drop_table("custom_products")
    op.drop_index(op.f("ix_products_jancode"), table_name="products")
    op.drop_index(op.f("ix_products_id"), table_name="products")
    op.drop_table("products")
    op.drop_index(op.f("ix_login_username"), table_name="login")
    op.drop_index(op.f("ix_login_id"), table_name="login")
    op.drop_table("login")
