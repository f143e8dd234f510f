"""
BlogHub Backend — User Service
================================

What:  Store operations behind /api/users.
Who:   Called by the users route handlers.

Identifier handling differs from the category and blog services: user routes
test ids with the store's native `ObjectId.is_valid` (which also accepts
upper-case hex) and answer 400 for ids that fail it, instead of collapsing
malformed ids into 404.

Error Handling Strategy:
    Application exceptions (ValidationError, NotFoundError) propagate as-is.
    Anything else, including unique constraint violations and body
    validation failures, is wrapped in OperationError with the route's
    failure message.
"""

import logging
from typing import List, Optional

from bson import ObjectId
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bloghub.exceptions import BlogHubError, NotFoundError, OperationError, ValidationError
from bloghub.models import User
from bloghub.models.document import utcnow
from bloghub.schemas.user import UserCreate
from bloghub.services import BodyReader

logger = logging.getLogger(__name__)


class UserService:
    """
    Responsibilities:
        - list_users():      every user document
        - create_user():     insert from the request body
        - update_username(): change only the username
        - delete_user():     delete and return the removed document
    """

    async def list_users(self, db: AsyncSession) -> List[User]:
        try:
            result = await db.execute(select(User))
            return list(result.scalars().all())
        except Exception as e:
            logger.error("Error listing users: %s", str(e), exc_info=True)
            raise OperationError.wrap("Error in fetching users!", e)

    async def create_user(self, db: AsyncSession, read_body: BodyReader) -> User:
        """
        Insert a user built from the JSON body.

        Args:
            db: Async database session
            read_body: Awaitable returning the parsed JSON body

        Raises:
            OperationError: Malformed body, failed validation, or a duplicate
                email/username rejected by the store's unique constraints.
        """
        try:
            payload = UserCreate.model_validate(await read_body())
            user = User(**payload.model_dump())
            db.add(user)
            # Flush now so constraint violations surface inside this handler
            await db.flush()
            logger.info("User created: %s (%s)", user.id, user.username)
            return user
        except Exception as e:
            logger.error("Error creating user: %s", str(e))
            raise OperationError.wrap("Error in creating user!", e)

    async def update_username(
        self,
        db: AsyncSession,
        user_id: Optional[str],
        read_body: BodyReader,
    ) -> User:
        """
        Set a new username on the user named by `user_id`.

        Raises:
            NotFoundError: userId or username missing ("Id or new username not
                found!"), or no such user ("User not found!").
            ValidationError: userId is not a valid ObjectId.
            OperationError: Anything else (e.g. the username is taken).
        """
        try:
            body = await read_body()
            username = body.get("username") if isinstance(body, dict) else None

            if not user_id or not username:
                raise NotFoundError("user", message="Id or new username not found!")

            if not ObjectId.is_valid(user_id):
                raise ValidationError("Invalid user id", field="userId")

            result = await db.execute(
                update(User)
                .where(User.id == str(ObjectId(user_id)))
                .values(username=username, updated_at=utcnow())
                .returning(User)
            )
            user = result.scalar_one_or_none()
            if user is None:
                raise NotFoundError("user", resource_id=user_id)

            logger.info("User %s renamed to %s", user.id, user.username)
            return user
        except BlogHubError:
            raise
        except Exception as e:
            logger.error("Error updating user %s: %s", user_id, str(e))
            raise OperationError.wrap("Error in updating user!", e)

    async def delete_user(self, db: AsyncSession, user_id: Optional[str]) -> User:
        """
        Delete a user and return the removed document.

        Categories and blogs owned by the user are left in place.

        Raises:
            ValidationError: userId missing or not a valid ObjectId.
            NotFoundError: No such user.
        """
        try:
            if not user_id or not ObjectId.is_valid(user_id):
                raise ValidationError("Invalid or missing userId", field="userId")

            result = await db.execute(
                delete(User)
                .where(User.id == str(ObjectId(user_id)))
                .returning(User)
            )
            user = result.scalar_one_or_none()
            if user is None:
                raise NotFoundError("user", resource_id=user_id)

            logger.info("User deleted: %s", user.id)
            return user
        except BlogHubError:
            raise
        except Exception as e:
            logger.error("Error deleting user %s: %s", user_id, str(e))
            raise OperationError.wrap("Error in deleting user!", e)


# Stateless; one instance serves every request
user_service = UserService()
