"""initial gift list schema

Revision ID: 3f2b7c1d9e10
Revises:
Create Date: 2026-10-19 15:20:11.418230

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2b7c1d9e10"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "family_groups",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("invite_code", sa.String(length=32), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_family_groups_id"), "family_groups", ["id"], unique=False)
    op.create_index(
        op.f("ix_family_groups_invite_code"), "family_groups", ["invite_code"], unique=True
    )
    op.create_index(
        op.f("ix_family_groups_created_at"), "family_groups", ["created_at"], unique=False
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("family_group_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["family_group_id"], ["family_groups.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_family_group_id"), "users", ["family_group_id"], unique=False)

    op.create_table(
        "wishlist_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Integer(), nullable=True),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("priority", sa.String(length=20), nullable=False),
        sa.Column("store_link", sa.String(length=2000), nullable=True),
        sa.Column("image_url", sa.String(length=2000), nullable=True),
        sa.Column("is_reserved", sa.Boolean(), nullable=False),
        sa.Column("reserved_by_user_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "(is_reserved AND reserved_by_user_id IS NOT NULL)"
            " OR (NOT is_reserved AND reserved_by_user_id IS NULL)",
            name="ck_wishlist_items_reservation_state",
        ),
        sa.CheckConstraint(
            "reserved_by_user_id IS NULL OR reserved_by_user_id != user_id",
            name="ck_wishlist_items_no_self_reservation",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["reserved_by_user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_wishlist_items_id"), "wishlist_items", ["id"], unique=False)
    op.create_index(op.f("ix_wishlist_items_user_id"), "wishlist_items", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_wishlist_items_reserved_by_user_id"),
        "wishlist_items",
        ["reserved_by_user_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_wishlist_items_created_at"), "wishlist_items", ["created_at"], unique=False
    )

    op.create_table(
        "activities",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("family_group_id", sa.Integer(), nullable=False),
        sa.Column("action", sa.String(length=50), nullable=False),
        sa.Column("item_name", sa.String(length=255), nullable=True),
        sa.Column("target_user_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["family_group_id"], ["family_groups.id"]),
        sa.ForeignKeyConstraint(["target_user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_activities_id"), "activities", ["id"], unique=False)
    op.create_index(op.f("ix_activities_user_id"), "activities", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_activities_family_group_id"), "activities", ["family_group_id"], unique=False
    )
    op.create_index(op.f("ix_activities_created_at"), "activities", ["created_at"], unique=False)

    op.create_table(
        "secret_notes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("wishlist_item_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("note", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_secret_notes_id"), "secret_notes", ["id"], unique=False)
    op.create_index(
        op.f("ix_secret_notes_wishlist_item_id"), "secret_notes", ["wishlist_item_id"], unique=False
    )
    op.create_index(op.f("ix_secret_notes_user_id"), "secret_notes", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_secret_notes_created_at"), "secret_notes", ["created_at"], unique=False
    )

    op.create_table(
        "sessions",
        sa.Column("token", sa.String(length=64), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("family_group_id", sa.Integer(), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("token"),
    )
    op.create_index(op.f("ix_sessions_user_id"), "sessions", ["user_id"], unique=False)
    op.create_index(op.f("ix_sessions_expires_at"), "sessions", ["expires_at"], unique=False)
    op.create_index(op.f("ix_sessions_created_at"), "sessions", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_table("sessions")
    op.drop_table("secret_notes")
    op.drop_table("activities")
    op.drop_table("wishlist_items")
    op.drop_table("users")
    op.drop_table("family_groups")
