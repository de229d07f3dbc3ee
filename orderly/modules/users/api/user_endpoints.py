"""
User Management API Endpoints

REST API endpoints for user CRUD operations. Errors are not caught here;
they propagate to the app-level handlers in orderly.modules.errors.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, Path

from orderly.modules.users.schemas import (
    MAX_USER_ID,
    CreateUserRequest,
    UpdateUserRequest,
    UserDetail,
    UserResponse,
)
from orderly.modules.users.services.user_service import UserService

logger = logging.getLogger("orderly.users.api")

router = APIRouter(prefix="/api/user", tags=["users"])

UserIdPath = Annotated[int, Path(ge=1, le=MAX_USER_ID)]

# Service instance
_user_service = UserService()


@router.post("", status_code=201, response_model=UserResponse)
async def create_user(request: CreateUserRequest):
    """
    Create a new user.

    Returns the id assigned by the database along with the submitted name and email.
    """
    logger.debug(f"[user_endpoints.create_user] email={request.email}")
    return await _user_service.create_user(request)


@router.put("/{user_id}", response_model=UserDetail)
async def update_user(user_id: UserIdPath, request: UpdateUserRequest):
    """
    Update a user's name.

    The path id selects the user; a body id, when sent, must match it.
    """
    logger.debug(f"[user_endpoints.update_user] user_id={user_id}")
    user = await _user_service.update_user(user_id, request)
    return UserDetail.from_user(user)


@router.get("/{user_id}", response_model=UserDetail)
async def get_user(user_id: UserIdPath):
    """Get user details by ID."""
    logger.debug(f"[user_endpoints.get_user] user_id={user_id}")
    user = await _user_service.get_user(user_id)
    return UserDetail.from_user(user)


@router.delete("/{user_id}", response_model=bool)
async def delete_user(user_id: UserIdPath):
    """
    Delete a user.

    Returns true if the user existed and was removed, false otherwise.
    """
    logger.debug(f"[user_endpoints.delete_user] user_id={user_id}")
    return await _user_service.delete_user(user_id)
