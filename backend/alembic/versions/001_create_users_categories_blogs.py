"""Create users, categories and blogs tables

Revision ID: 001
Revises: None
Create Date: 2024-03-01 00:00:00.000000+00:00

What:  Creates the three document tables.
How:   Identifiers are 24-character hex ObjectIds generated by the
       application, so no server-side default is declared for `id`.
       Owner references are plain indexed columns; there are no foreign keys,
       so deleting a user or category leaves its children in place.

Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _document_columns():
    return [
        sa.Column("id", sa.String(24), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        *_document_columns(),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.UniqueConstraint("username"),
    )
    op.create_index("ix_users_created_at", "users", ["created_at"])

    op.create_table(
        "categories",
        *_document_columns(),
        sa.Column("user_id", sa.String(24), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_categories_created_at", "categories", ["created_at"])
    op.create_index("ix_categories_user_id", "categories", ["user_id"])

    op.create_table(
        "blogs",
        *_document_columns(),
        sa.Column("user_id", sa.String(24), nullable=False),
        sa.Column("category_id", sa.String(24), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_blogs_created_at", "blogs", ["created_at"])
    # Serves the list query: WHERE user_id = :u AND category_id = :c ORDER BY created_at DESC
    op.create_index("idx_blogs_owner", "blogs", ["user_id", "category_id"])


def downgrade() -> None:
    op.drop_index("idx_blogs_owner", table_name="blogs")
    op.drop_index("ix_blogs_created_at", table_name="blogs")
    op.drop_table("blogs")

    op.drop_index("ix_categories_user_id", table_name="categories")
    op.drop_index("ix_categories_created_at", table_name="categories")
    op.drop_table("categories")

    op.drop_index("ix_users_created_at", table_name="users")
    op.drop_table("users")
