"""
BlogHub Backend — User Model
=============================

Users are referenced by categories and blogs but own no relationship
themselves. Email and username are unique; the password is stored as given.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bloghub.database import Base
from bloghub.models.document import DocumentMixin


class User(DocumentMixin, Base):
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
