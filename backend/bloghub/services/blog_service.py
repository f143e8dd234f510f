"""
BlogHub Backend — Blog Service
================================

What:  Store operations behind /api/blogs, scoped to a user and category.
Who:   Called by the blogs route handlers.

Every operation first runs the ownership chain in order:
    user exists → category belongs to user → (blog belongs to both)
and reports the first broken link as 404 with that entity's name.

Updates and deletes are single statements filtered on the full chain
(id, user_id, category_id), so a blog that moved or vanished between the
check and the write is never modified; the request answers 404 instead.

Listing:
    SELECT * FROM blogs
    WHERE user_id = :u AND category_id = :c [AND keyword/date filters]
    ORDER BY created_at DESC OFFSET (page - 1) * limit LIMIT limit
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bloghub.exceptions import BlogHubError, NotFoundError, OperationError, ValidationError
from bloghub.models import Blog
from bloghub.models.document import utcnow
from bloghub.schemas.blog import BlogWrite
from bloghub.schemas.common import ListParams
from bloghub.services import BodyReader
from bloghub.services.listing import apply_list_filters
from bloghub.services.ownership import require_ownership

logger = logging.getLogger(__name__)


def _owned_by(blog_id: Optional[str], category_id: Optional[str], user_id: Optional[str]):
    return (
        Blog.id == blog_id,
        Blog.user_id == user_id,
        Blog.category_id == category_id,
    )


class BlogService:
    """
    Responsibilities:
        - list_blogs():  filtered, paginated, newest first
        - create_blog(): insert into a user's category
        - get_blog():    one blog within its ownership scope
        - update_blog(): replace title and description
        - delete_blog(): delete and return the removed document
    """

    async def list_blogs(
        self,
        db: AsyncSession,
        user_id: Optional[str],
        category_id: Optional[str],
        params: ListParams,
    ) -> List[Blog]:
        """
        Blogs of one user's category.

        Raises:
            NotFoundError: User or category missing.
            OperationError: Store failure or an unparseable startDate/endDate.
        """
        try:
            await require_ownership(db, user_id, category_id, check_category=True)
            query = (
                select(Blog)
                .where(Blog.user_id == user_id, Blog.category_id == category_id)
                .order_by(desc(Blog.created_at))
            )
            query = apply_list_filters(query, Blog, params)
            result = await db.execute(query)
            blogs = list(result.scalars().all())
            logger.debug(
                "Listed %d blogs for user=%s category=%s page=%d",
                len(blogs), user_id, category_id, params.page,
            )
            return blogs
        except BlogHubError:
            raise
        except Exception as e:
            logger.error("Error listing blogs: %s", str(e), exc_info=True)
            raise OperationError.wrap("Error in fetching blogs!", e)

    async def create_blog(
        self,
        db: AsyncSession,
        user_id: Optional[str],
        category_id: Optional[str],
        read_body: BodyReader,
    ) -> Blog:
        try:
            await require_ownership(db, user_id, category_id, check_category=True)
            payload = BlogWrite.model_validate(await read_body())
            blog = Blog(user_id=user_id, category_id=category_id, **payload.model_dump())
            db.add(blog)
            await db.flush()
            logger.info("Blog created: %s in category %s", blog.id, category_id)
            return blog
        except BlogHubError:
            raise
        except Exception as e:
            logger.error("Error creating blog: %s", str(e))
            raise OperationError.wrap("Error in creating blog!", e)

    async def get_blog(
        self,
        db: AsyncSession,
        user_id: Optional[str],
        category_id: Optional[str],
        blog_id: Optional[str],
    ) -> Blog:
        try:
            await require_ownership(
                db, user_id, category_id, blog_id,
                check_category=True, check_blog=True,
            )
            result = await db.execute(select(Blog).where(*_owned_by(blog_id, category_id, user_id)))
            blog = result.scalar_one_or_none()
            if blog is None:
                raise NotFoundError("blog", resource_id=blog_id)
            return blog
        except BlogHubError:
            raise
        except Exception as e:
            logger.error("Error fetching blog %s: %s", blog_id, str(e))
            raise OperationError.wrap("Error in fetching a blog!", e)

    async def update_blog(
        self,
        db: AsyncSession,
        user_id: Optional[str],
        category_id: Optional[str],
        blog_id: Optional[str],
        read_body: BodyReader,
    ) -> Blog:
        """
        Replace title and description of a blog.

        Raises:
            NotFoundError: Any link of the ownership chain missing.
            ValidationError: title or description empty ("Invalid input data").
        """
        try:
            await require_ownership(
                db, user_id, category_id, blog_id,
                check_category=True, check_blog=True,
            )

            body = await read_body()
            if not isinstance(body, dict) or not body.get("title") or not body.get("description"):
                raise ValidationError("Invalid input data")
            payload = BlogWrite.model_validate(body)

            result = await db.execute(
                update(Blog)
                .where(*_owned_by(blog_id, category_id, user_id))
                .values(
                    title=payload.title,
                    description=payload.description,
                    updated_at=utcnow(),
                )
                .returning(Blog)
            )
            blog = result.scalar_one_or_none()
            if blog is None:
                raise NotFoundError("blog", resource_id=blog_id)

            logger.info("Blog updated: %s", blog.id)
            return blog
        except BlogHubError:
            raise
        except Exception as e:
            logger.error("Error updating blog %s: %s", blog_id, str(e))
            raise OperationError.wrap("Error in updating blog!", e)

    async def delete_blog(
        self,
        db: AsyncSession,
        user_id: Optional[str],
        category_id: Optional[str],
        blog_id: Optional[str],
    ) -> Blog:
        try:
            await require_ownership(
                db, user_id, category_id, blog_id,
                check_category=True, check_blog=True,
            )

            result = await db.execute(
                delete(Blog)
                .where(*_owned_by(blog_id, category_id, user_id))
                .returning(Blog)
            )
            blog = result.scalar_one_or_none()
            if blog is None:
                raise NotFoundError("blog", resource_id=blog_id)

            logger.info("Blog deleted: %s", blog.id)
            return blog
        except BlogHubError:
            raise
        except Exception as e:
            logger.error("Error deleting blog %s: %s", blog_id, str(e))
            raise OperationError.wrap("Error in deleting blog!", e)


blog_service = BlogService()
