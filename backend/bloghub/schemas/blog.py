"""
BlogHub Backend — Blog Schemas
===============================
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from bloghub.schemas.common import DocumentRead


class BlogWrite(BaseModel):
    """Body of POST and PATCH /api/blogs."""
    title: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=255)


class BlogRead(DocumentRead):
    user_id: str = Field(alias="user")
    category_id: str = Field(alias="category")
    title: str
    description: Optional[str] = None


class BlogEnvelope(BaseModel):
    message: str
    blog: BlogRead


class BlogDetailResponse(BaseModel):
    blog: BlogRead


class BlogListResponse(BaseModel):
    blogs: List[BlogRead]
