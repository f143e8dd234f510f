"""
BlogHub Backend — Shared Document Columns
==========================================

What:  Identifier and timestamp columns every stored document carries.
How:   A declarative mixin; the identifier is a 24-character hex ObjectId
       generated in Python so it is known before the INSERT is flushed.
"""

from datetime import datetime, timezone

from bson import ObjectId
from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

OBJECT_ID_LENGTH = 24


def new_object_id() -> str:
    """Returns a fresh document identifier, e.g. '65f1c2a94b1d3e0012ab34cd'."""
    return str(ObjectId())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentMixin:
    """Store-assigned identity and created/updated timestamps (UTC)."""

    id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH),
        primary_key=True,
        default=new_object_id,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
