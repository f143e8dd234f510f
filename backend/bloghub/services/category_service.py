"""
BlogHub Backend — Category Service
====================================

What:  Store operations behind /api/categories, always scoped to a user.
Who:   Called by the categories route handlers.

Mutation pattern:
    1. require_ownership(): user exists, then category belongs to that user
    2. Parse the body (PATCH/POST only)
    3. One conditional statement filtered on id AND user_id:
           UPDATE categories SET ... WHERE id = :c AND user_id = :u RETURNING *
       If the category disappeared after step 1 the statement matches
       nothing and the request ends in 404 rather than touching another
       user's document.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bloghub.exceptions import BlogHubError, NotFoundError, OperationError, ValidationError
from bloghub.models import Category
from bloghub.models.document import utcnow
from bloghub.schemas.category import CategoryWrite
from bloghub.schemas.common import ListParams
from bloghub.services import BodyReader
from bloghub.services.listing import apply_list_filters
from bloghub.services.ownership import require_ownership

logger = logging.getLogger(__name__)


class CategoryService:

    async def list_categories(
        self,
        db: AsyncSession,
        user_id: Optional[str],
        params: ListParams,
    ) -> List[Category]:
        """
        Categories of one user, filtered and paginated. No order is guaranteed.

        Raises:
            NotFoundError: The user does not exist (or userId is malformed).
        """
        try:
            await require_ownership(db, user_id)
            query = apply_list_filters(
                select(Category).where(Category.user_id == user_id),
                Category,
                params,
            )
            result = await db.execute(query)
            return list(result.scalars().all())
        except BlogHubError:
            raise
        except Exception as e:
            logger.error("Error listing categories of user %s: %s", user_id, str(e), exc_info=True)
            raise OperationError.wrap("Error in fetching category!", e)

    async def create_category(
        self,
        db: AsyncSession,
        user_id: Optional[str],
        read_body: BodyReader,
    ) -> Category:
        try:
            await require_ownership(db, user_id)
            payload = CategoryWrite.model_validate(await read_body())
            category = Category(user_id=user_id, **payload.model_dump())
            db.add(category)
            await db.flush()
            logger.info("Category created: %s for user %s", category.id, user_id)
            return category
        except BlogHubError:
            raise
        except Exception as e:
            logger.error("Error creating category for user %s: %s", user_id, str(e))
            raise OperationError.wrap("Failed to create category!", e)

    async def update_category(
        self,
        db: AsyncSession,
        user_id: Optional[str],
        category_id: Optional[str],
        read_body: BodyReader,
    ) -> Category:
        """
        Replace title and description of a user's category.

        Raises:
            NotFoundError: User or category missing ("User not found!" /
                "Category not found!").
            ValidationError: title or description empty ("Invalid input data").
        """
        try:
            await require_ownership(db, user_id, category_id, check_category=True)

            body = await read_body()
            if not isinstance(body, dict) or not body.get("title") or not body.get("description"):
                raise ValidationError("Invalid input data")
            payload = CategoryWrite.model_validate(body)

            result = await db.execute(
                update(Category)
                .where(Category.id == category_id, Category.user_id == user_id)
                .values(
                    title=payload.title,
                    description=payload.description,
                    updated_at=utcnow(),
                )
                .returning(Category)
            )
            category = result.scalar_one_or_none()
            if category is None:
                raise NotFoundError("category", resource_id=category_id)

            logger.info("Category updated: %s", category.id)
            return category
        except BlogHubError:
            raise
        except Exception as e:
            logger.error("Error updating category %s: %s", category_id, str(e))
            raise OperationError.wrap("Error in updating category!", e)

    async def delete_category(
        self,
        db: AsyncSession,
        user_id: Optional[str],
        category_id: Optional[str],
    ) -> Category:
        """Delete a user's category. Its blogs are not removed."""
        try:
            await require_ownership(db, user_id, category_id, check_category=True)

            result = await db.execute(
                delete(Category)
                .where(Category.id == category_id, Category.user_id == user_id)
                .returning(Category)
            )
            category = result.scalar_one_or_none()
            if category is None:
                raise NotFoundError("category", resource_id=category_id)

            logger.info("Category deleted: %s", category.id)
            return category
        except BlogHubError:
            raise
        except Exception as e:
            logger.error("Error deleting category %s: %s", category_id, str(e))
            raise OperationError.wrap("Error in deleting category!", e)


category_service = CategoryService()
