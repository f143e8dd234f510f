"""
BlogHub Backend — Category Schemas
===================================
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from bloghub.schemas.common import DocumentRead


class CategoryWrite(BaseModel):
    """Body of POST and PATCH /api/categories."""
    title: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=255)


class CategoryRead(DocumentRead):
    user_id: str = Field(alias="user")
    title: str
    description: Optional[str] = None


class CategoryEnvelope(BaseModel):
    message: str
    category: CategoryRead


class CategoryListResponse(BaseModel):
    categories: List[CategoryRead]
