"""
User Service

Business logic for user management operations. Every operation runs in its
own database transaction.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from databases import Database

from orderly.modules.database import database
from orderly.modules.users.domain.user import User
from orderly.modules.users.exceptions import UserIdMismatchError, UserNotFoundError
from orderly.modules.users.repositories.user_repository import UserRepository
from orderly.modules.users.schemas import CreateUserRequest, UpdateUserRequest, UserResponse

logger = logging.getLogger("orderly.users.service")


def _utcnow() -> datetime:
    # Stored as naive UTC, matching TIMESTAMP WITHOUT TIME ZONE columns
    return datetime.now(timezone.utc).replace(tzinfo=None)


class UserService:
    """Service for user business logic."""

    def __init__(self, repository: Optional[UserRepository] = None, db: Optional[Database] = None):
        self.database = db or database
        self.repository = repository or UserRepository(self.database)

    async def create_user(self, request: CreateUserRequest) -> UserResponse:
        """Create a new user and return its public projection."""
        logger.debug(f"[UserService.create_user] email={request.email}")

        now = _utcnow()
        user = User(
            name=request.name,
            email=request.email,
            created_at=now,
            updated_at=now,
        )
        async with self.database.transaction():
            saved = await self.repository.save(user)

        logger.info(f"Created user {saved.id}")
        return UserResponse.from_user(saved)

    async def update_user(self, user_id: int, request: UpdateUserRequest) -> User:
        """
        Rename an existing user and refresh its updated_at stamp.

        Raises:
            UserIdMismatchError: request.id is set and differs from user_id
            UserNotFoundError: no user exists for user_id
        """
        logger.debug(f"[UserService.update_user] user_id={user_id}")

        if request.id is not None and request.id != user_id:
            raise UserIdMismatchError(user_id, request.id)

        async with self.database.transaction():
            user = await self.repository.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(user_id)

            user.name = request.name
            # Clock skew must never move updated_at backwards
            user.updated_at = max(_utcnow(), user.updated_at)
            saved = await self.repository.save(user)

        logger.info(f"Updated user {user_id}")
        return saved

    async def get_user(self, user_id: int) -> User:
        """Get user by ID, raising UserNotFoundError when absent."""
        logger.debug(f"[UserService.get_user] user_id={user_id}")

        async with self.database.transaction():
            user = await self.repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def delete_user(self, user_id: int) -> bool:
        """Delete user. Returns False, without side effects, when it does not exist."""
        logger.debug(f"[UserService.delete_user] user_id={user_id}")

        async with self.database.transaction():
            if not await self.repository.exists_by_id(user_id):
                return False
            await self.repository.delete_by_id(user_id)

        logger.info(f"Deleted user {user_id}")
        return True
