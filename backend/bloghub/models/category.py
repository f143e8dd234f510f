"""
BlogHub Backend — Category Model
=================================

A category belongs to exactly one user and is only ever looked up together
with that user's id.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from bloghub.database import Base
from bloghub.models.document import OBJECT_ID_LENGTH, DocumentMixin


class Category(DocumentMixin, Base):
    __tablename__ = "categories"

    user_id: Mapped[str] = mapped_column(String(OBJECT_ID_LENGTH), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, user_id={self.user_id}, title='{self.title}')>"
