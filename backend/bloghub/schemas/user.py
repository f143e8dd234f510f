"""
BlogHub Backend — User Schemas
===============================

Responses mirror the stored document, password included.
"""

from pydantic import BaseModel, Field

from bloghub.schemas.common import DocumentRead


class UserCreate(BaseModel):
    """Body of POST /api/users. Unique constraints are enforced by the store."""
    email: str = Field(min_length=1, max_length=100)
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)


class UserRead(DocumentRead):
    email: str
    username: str
    password: str


class UserEnvelope(BaseModel):
    message: str
    user: UserRead

