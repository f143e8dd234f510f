"""
BlogHub Backend — Blog Model
=============================

A blog belongs to one user and one of that user's categories. Every lookup
filters on id, user_id and category_id together.

Query Patterns:
    - List a category's blogs, newest first:
      WHERE user_id = :u AND category_id = :c ORDER BY created_at DESC
      → idx_blogs_owner covers the filter
"""

from typing import Optional

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from bloghub.database import Base
from bloghub.models.document import OBJECT_ID_LENGTH, DocumentMixin


class Blog(DocumentMixin, Base):
    __tablename__ = "blogs"

    user_id: Mapped[str] = mapped_column(String(OBJECT_ID_LENGTH), nullable=False)
    category_id: Mapped[str] = mapped_column(String(OBJECT_ID_LENGTH), nullable=False)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index("idx_blogs_owner", "user_id", "category_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Blog(id={self.id}, user_id={self.user_id}, "
            f"category_id={self.category_id}, title='{self.title}')>"
        )
