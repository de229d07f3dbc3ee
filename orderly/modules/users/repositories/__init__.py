"""
Data Access Layer (Repositories)

Repositories handle all database interactions.
"""

from .user_repository import UserRepository, users

__all__ = [
    "UserRepository",
    "users",
]
