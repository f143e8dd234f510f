"""
BlogHub Backend — Identifier Validation & Ownership Checks
============================================================

What:  Decides whether identifiers are well formed and whether the documents
       they name exist within their owner's scope.
Why:   Every category and blog route starts with the same chain of checks:
       user, then category, then blog. The first failure becomes a 404.
How:   Each checker validates its identifiers first and returns False without
       touching the store when any of them is malformed; otherwise it runs a
       single SELECT of the primary key filtered by the whole ownership chain.

Checks are not cached: calling one twice queries twice.
"""

import logging
import re
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bloghub.exceptions import NotFoundError
from bloghub.models import Blog, Category, User

logger = logging.getLogger(__name__)

_OBJECT_ID_RE = re.compile(r"[0-9a-f]{24}")


def is_valid_object_id(value: Optional[str]) -> bool:
    """True iff `value` is 24 lowercase hexadecimal characters."""
    return bool(value) and isinstance(value, str) and _OBJECT_ID_RE.fullmatch(value) is not None


async def user_exists(db: AsyncSession, user_id: Optional[str]) -> bool:
    if not is_valid_object_id(user_id):
        return False
    result = await db.execute(select(User.id).where(User.id == user_id))
    return result.scalar_one_or_none() is not None


async def category_exists(
    db: AsyncSession,
    category_id: Optional[str],
    user_id: Optional[str],
) -> bool:
    if not is_valid_object_id(user_id) or not is_valid_object_id(category_id):
        return False
    result = await db.execute(
        select(Category.id).where(
            Category.id == category_id,
            Category.user_id == user_id,
        )
    )
    return result.scalar_one_or_none() is not None


async def blog_exists(
    db: AsyncSession,
    blog_id: Optional[str],
    category_id: Optional[str],
    user_id: Optional[str],
) -> bool:
    if not (
        is_valid_object_id(user_id)
        and is_valid_object_id(category_id)
        and is_valid_object_id(blog_id)
    ):
        return False
    result = await db.execute(
        select(Blog.id).where(
            Blog.id == blog_id,
            Blog.user_id == user_id,
            Blog.category_id == category_id,
        )
    )
    return result.scalar_one_or_none() is not None


async def require_ownership(
    db: AsyncSession,
    user_id: Optional[str],
    category_id: Optional[str] = None,
    blog_id: Optional[str] = None,
    check_category: bool = False,
    check_blog: bool = False,
) -> None:
    """
    Run the ownership chain in order: user, category, blog.

    Raises:
        NotFoundError: For the first link that fails ("User not found!",
            "Category not found!" or "Blog not found!").
    """
    if not await user_exists(db, user_id):
        logger.debug("Ownership check failed: user %s", user_id)
        raise NotFoundError("user", resource_id=user_id)

    if check_category and not await category_exists(db, category_id, user_id):
        logger.debug("Ownership check failed: category %s of user %s", category_id, user_id)
        raise NotFoundError("category", resource_id=category_id)

    if check_blog and not await blog_exists(db, blog_id, category_id, user_id):
        logger.debug("Ownership check failed: blog %s", blog_id)
        raise NotFoundError("blog", resource_id=blog_id)
