"""
Domain Models

Pure data models representing the user entity.
"""

from .user import User

__all__ = [
    "User",
]
