"""
User Repository

Handles all database operations for users table.
"""
import logging
from typing import Optional

import sqlalchemy
from databases import Database

from orderly.modules.database import database, metadata
from orderly.modules.users.domain.user import User

logger = logging.getLogger("orderly.users.repository")

users = sqlalchemy.Table(
    "users",
    metadata,
    # INTEGER on SQLite so the column stays the rowid alias and autoincrements
    sqlalchemy.Column(
        "id",
        sqlalchemy.BigInteger().with_variant(sqlalchemy.Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    ),
    sqlalchemy.Column("name", sqlalchemy.String(255), nullable=False),
    sqlalchemy.Column("email", sqlalchemy.String(255), nullable=False),
    sqlalchemy.Column("created_at", sqlalchemy.DateTime, nullable=False),
    sqlalchemy.Column("updated_at", sqlalchemy.DateTime, nullable=False),
)


class UserRepository:
    """Repository for user data access."""

    def __init__(self, db: Optional[Database] = None):
        self.database = db or database

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID. Returns None when no row matches."""
        query = users.select().where(users.c.id == user_id)
        row = await self.database.fetch_one(query)
        if not row:
            return None
        return User.from_dict(row)

    async def exists_by_id(self, user_id: int) -> bool:
        query = sqlalchemy.select(users.c.id).where(users.c.id == user_id)
        return await self.database.fetch_val(query) is not None

    async def save(self, user: User) -> User:
        """
        Insert the user when it has no id yet, otherwise update the existing row.

        Returns the persisted user as stored, with its id populated.
        """
        if user.id is None:
            query = users.insert().values(
                name=user.name,
                email=user.email,
                created_at=user.created_at,
                updated_at=user.updated_at,
            )
            user_id = await self.database.execute(query)
            logger.debug(f"Inserted user row id={user_id}")
        else:
            user_id = user.id
            query = (
                users.update()
                .where(users.c.id == user_id)
                .values(
                    name=user.name,
                    email=user.email,
                    updated_at=user.updated_at,
                )
            )
            await self.database.execute(query)
            logger.debug(f"Updated user row id={user_id}")

        return await self.get_by_id(user_id)

    async def delete_by_id(self, user_id: int) -> None:
        """Delete the row if present; missing rows are ignored."""
        query = users.delete().where(users.c.id == user_id)
        await self.database.execute(query)
        logger.debug(f"Deleted user row id={user_id}")
