"""
BlogHub Backend — Category Route Handlers
==========================================

What:  Categories scoped to the user named by `userId`.
       A malformed or unknown userId/categoryId answers 404, never 400.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bloghub.config import settings
from bloghub.database import get_db_session
from bloghub.schemas.category import CategoryEnvelope, CategoryListResponse, CategoryRead
from bloghub.schemas.common import ErrorResponse, ListParams
from bloghub.services.category_service import category_service

router = APIRouter(prefix=settings.api_prefix, tags=["Categories"])

NOT_FOUND = {404: {"description": "User or category not found", "model": ErrorResponse}}
SERVER_ERROR = {500: {"model": ErrorResponse}}


@router.get(
    "/categories",
    response_model=CategoryListResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="List a user's categories",
    description=(
        "Supports page/limit pagination, a case-insensitive keyword match on "
        "title or description, and an inclusive creation-date range."
    ),
)
async def list_categories(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1),
    keywords: Optional[str] = Query(default=None),
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    db: AsyncSession = Depends(get_db_session),
):
    params = ListParams(
        page=page, limit=limit, keywords=keywords,
        start_date=start_date, end_date=end_date,
    )
    categories = await category_service.list_categories(db, user_id, params)
    return CategoryListResponse(
        categories=[CategoryRead.model_validate(c) for c in categories],
    )


@router.post(
    "/categories",
    status_code=201,
    response_model=CategoryEnvelope,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Create a category for a user",
)
async def create_category(
    request: Request,
    user_id: Optional[str] = Query(default=None, alias="userId"),
    db: AsyncSession = Depends(get_db_session),
):
    category = await category_service.create_category(db, user_id, request.json)
    return CategoryEnvelope(
        message="Category created successfully!",
        category=CategoryRead.model_validate(category),
    )


@router.patch(
    "/categories/{category_id}",
    response_model=CategoryEnvelope,
    responses={
        400: {"description": "Empty title or description", "model": ErrorResponse},
        **NOT_FOUND,
        **SERVER_ERROR,
    },
    summary="Update a category's title and description",
)
async def update_category(
    category_id: str,
    request: Request,
    user_id: Optional[str] = Query(default=None, alias="userId"),
    db: AsyncSession = Depends(get_db_session),
):
    category = await category_service.update_category(db, user_id, category_id, request.json)
    return CategoryEnvelope(
        message="Category updated successfully!",
        category=CategoryRead.model_validate(category),
    )


@router.delete(
    "/categories/{category_id}",
    response_model=CategoryEnvelope,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Delete a category (its blogs are kept)",
)
async def delete_category(
    category_id: str,
    user_id: Optional[str] = Query(default=None, alias="userId"),
    db: AsyncSession = Depends(get_db_session),
):
    category = await category_service.delete_category(db, user_id, category_id)
    return CategoryEnvelope(
        message="Category deleted successfully!",
        category=CategoryRead.model_validate(category),
    )
