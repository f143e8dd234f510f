"""
BlogHub Backend — User Route Handlers
======================================

What:  CRUD for users. The user id always travels in the `userId` query
       parameter, never in the body.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bloghub.config import settings
from bloghub.database import get_db_session
from bloghub.schemas.common import ErrorResponse
from bloghub.schemas.user import UserEnvelope, UserRead
from bloghub.services.user_service import user_service

router = APIRouter(prefix=settings.api_prefix, tags=["Users"])


@router.get(
    "/users",
    response_model=List[UserRead],
    responses={500: {"model": ErrorResponse}},
    summary="List all users",
)
async def list_users(db: AsyncSession = Depends(get_db_session)):
    users = await user_service.list_users(db)
    return [UserRead.model_validate(user) for user in users]


@router.post(
    "/users",
    status_code=201,
    response_model=UserEnvelope,
    responses={500: {"description": "Invalid body or duplicate email/username", "model": ErrorResponse}},
    summary="Create a user",
)
async def create_user(request: Request, db: AsyncSession = Depends(get_db_session)):
    user = await user_service.create_user(db, request.json)
    return UserEnvelope(message="User is created!", user=UserRead.model_validate(user))


@router.patch(
    "/users",
    response_model=UserEnvelope,
    responses={
        400: {"description": "Invalid user id", "model": ErrorResponse},
        404: {"description": "Missing id/username or user not found", "model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Change a user's username",
)
async def update_user(
    request: Request,
    user_id: Optional[str] = Query(default=None, alias="userId"),
    db: AsyncSession = Depends(get_db_session),
):
    user = await user_service.update_username(db, user_id, request.json)
    return UserEnvelope(message="User is updated!", user=UserRead.model_validate(user))


@router.delete(
    "/users",
    response_model=UserEnvelope,
    responses={
        400: {"description": "Invalid or missing userId", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Delete a user (owned categories and blogs are kept)",
)
async def delete_user(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    db: AsyncSession = Depends(get_db_session),
):
    user = await user_service.delete_user(db, user_id)
    return UserEnvelope(message="User is deleted!", user=UserRead.model_validate(user))
