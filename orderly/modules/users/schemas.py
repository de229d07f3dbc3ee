"""
Request/Response Models

Shapes used at the API boundary, kept apart from the User domain model.
"""
from datetime import datetime
from typing import Annotated, Optional

import email_validator
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from orderly.modules.users.domain.user import User

# Largest value a signed 64-bit id column holds
MAX_USER_ID = 2**63 - 1

UserId = Annotated[int, Field(ge=1, le=MAX_USER_ID)]

# Format check only: reserved names such as localhost are accepted
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def _require_text(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise PydanticCustomError("not_blank", message)
    return value


class CreateUserRequest(BaseModel):
    name: Optional[str] = Field(default=None, validate_default=True)
    email: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> str:
        return _require_text(value, "Name is Required")

    @field_validator("email")
    @classmethod
    def email_well_formed(cls, value: Optional[str]) -> str:
        value = _require_text(value, "Email is Required")
        try:
            validate_email(
                value,
                check_deliverability=False,
                globally_deliverable=False,
                allow_domain_literal=True,
            )
        except EmailNotValidError:
            raise PydanticCustomError("email", "Email is invalid")
        # Stored exactly as submitted, no normalization
        return value


class UpdateUserRequest(BaseModel):
    id: Optional[UserId] = None
    name: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> str:
        return _require_text(value, "Name is Required")


class UserResponse(BaseModel):
    """Projection returned on create."""
    id: int
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, email=user.email)


class UserDetail(BaseModel):
    """Full user view, timestamps serialized as createdAt/updatedAt."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserDetail":
        return cls(**user.to_dict())


class ErrorResponse(BaseModel):
    code: str
    message: str
    status: int
    timestamp: Optional[datetime] = None
