"""Add media libraries, their tags and membership items.

Revision ID: 002
Revises: 001
Create Date: 2026-10-02 14:37:05.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | Sequence[str] | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create media_libraries, media_library_tags and media_library_items."""
    op.create_table(
        "media_libraries",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_system", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "name", name="uq_media_library_owner_name"),
    )
    op.create_index(op.f("ix_media_libraries_id"), "media_libraries", ["id"], unique=False)
    op.create_index(
        op.f("ix_media_libraries_user_id"), "media_libraries", ["user_id"], unique=False
    )

    op.create_table(
        "media_library_tags",
        sa.Column("library_id", sa.Integer(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["library_id"], ["media_libraries.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("library_id", "tag_id"),
    )

    op.create_table(
        "media_library_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("library_id", sa.Integer(), nullable=False),
        sa.Column("book_id", sa.Integer(), nullable=True),
        sa.Column("child_library_id", sa.Integer(), nullable=True),
        sa.Column("added_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "(book_id IS NULL) != (child_library_id IS NULL)",
            name="ck_media_library_item_single_target",
        ),
        sa.ForeignKeyConstraint(["library_id"], ["media_libraries.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["book_id"], ["books.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["child_library_id"], ["media_libraries.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("library_id", "book_id", name="uq_media_library_item_book"),
        sa.UniqueConstraint(
            "library_id", "child_library_id", name="uq_media_library_item_child_library"
        ),
    )
    op.create_index(
        op.f("ix_media_library_items_id"), "media_library_items", ["id"], unique=False
    )
    op.create_index(
        op.f("ix_media_library_items_library_id"),
        "media_library_items",
        ["library_id"],
        unique=False,
    )


def downgrade() -> None:
    """Drop media library tables."""
    op.drop_index(op.f("ix_media_library_items_library_id"), table_name="media_library_items")
    op.drop_index(op.f("ix_media_library_items_id"), table_name="media_library_items")
    op.drop_table("media_library_items")
    op.drop_table("media_library_tags")
    op.drop_index(op.f("ix_media_libraries_user_id"), table_name="media_libraries")
    op.drop_index(op.f("ix_media_libraries_id"), table_name="media_libraries")
    op.drop_table("media_libraries")
