"""
BlogHub Backend — Blog Route Handlers
======================================

What:  Blogs scoped to a user and one of that user's categories, both named
       in the query string (`userId`, `categoryId`); the blog id is a path
       parameter.

Example client usage:
    GET /api/blogs?userId=<u>&categoryId=<c>&page=2&limit=5&keywords=python
    GET /api/blogs?userId=<u>&categoryId=<c>&startDate=2024-01-01&endDate=2024-01-31
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bloghub.config import settings
from bloghub.database import get_db_session
from bloghub.schemas.blog import BlogDetailResponse, BlogEnvelope, BlogListResponse, BlogRead
from bloghub.schemas.common import ErrorResponse, ListParams
from bloghub.services.blog_service import blog_service

router = APIRouter(prefix=settings.api_prefix, tags=["Blogs"])

NOT_FOUND = {404: {"description": "User, category or blog not found", "model": ErrorResponse}}
SERVER_ERROR = {500: {"model": ErrorResponse}}


@router.get(
    "/blogs",
    response_model=BlogListResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="List blogs in a user's category, newest first",
)
async def list_blogs(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
    page: int = Query(default=1, ge=1, description="1-based page number"),
    limit: int = Query(default=settings.default_page_size, ge=1, description="Blogs per page"),
    keywords: Optional[str] = Query(default=None, description="Substring of title or description"),
    start_date: Optional[str] = Query(
        default=None, alias="startDate",
        description="Only blogs created at or after this ISO 8601 date",
    ),
    end_date: Optional[str] = Query(
        default=None, alias="endDate",
        description="Only blogs created at or before this ISO 8601 date",
    ),
    db: AsyncSession = Depends(get_db_session),
):
    params = ListParams(
        page=page, limit=limit, keywords=keywords,
        start_date=start_date, end_date=end_date,
    )
    blogs = await blog_service.list_blogs(db, user_id, category_id, params)
    return BlogListResponse(blogs=[BlogRead.model_validate(b) for b in blogs])


@router.post(
    "/blogs",
    status_code=201,
    response_model=BlogEnvelope,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Create a blog in a user's category",
)
async def create_blog(
    request: Request,
    user_id: Optional[str] = Query(default=None, alias="userId"),
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
    db: AsyncSession = Depends(get_db_session),
):
    blog = await blog_service.create_blog(db, user_id, category_id, request.json)
    return BlogEnvelope(message="Blog created successfully!", blog=BlogRead.model_validate(blog))


@router.get(
    "/blogs/{blog_id}",
    response_model=BlogDetailResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Get one blog",
)
async def get_blog(
    blog_id: str,
    user_id: Optional[str] = Query(default=None, alias="userId"),
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
    db: AsyncSession = Depends(get_db_session),
):
    blog = await blog_service.get_blog(db, user_id, category_id, blog_id)
    return BlogDetailResponse(blog=BlogRead.model_validate(blog))


@router.patch(
    "/blogs/{blog_id}",
    response_model=BlogEnvelope,
    responses={
        400: {"description": "Empty title or description", "model": ErrorResponse},
        **NOT_FOUND,
        **SERVER_ERROR,
    },
    summary="Update a blog's title and description",
)
async def update_blog(
    blog_id: str,
    request: Request,
    user_id: Optional[str] = Query(default=None, alias="userId"),
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
    db: AsyncSession = Depends(get_db_session),
):
    blog = await blog_service.update_blog(db, user_id, category_id, blog_id, request.json)
    return BlogEnvelope(message="Blog updated successfully!", blog=BlogRead.model_validate(blog))


@router.delete(
    "/blogs/{blog_id}",
    response_model=BlogEnvelope,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Delete a blog",
)
async def delete_blog(
    blog_id: str,
    user_id: Optional[str] = Query(default=None, alias="userId"),
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
    db: AsyncSession = Depends(get_db_session),
):
    blog = await blog_service.delete_blog(db, user_id, category_id, blog_id)
    return BlogEnvelope(message="Blog deleted successfully!", blog=BlogRead.model_validate(blog))
