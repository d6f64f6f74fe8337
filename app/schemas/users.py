from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import EmailStr, StringConstraints

from app.models.enums import UserRole
from app.schemas.base import BaseSchema


class UserRetrieveSchema(BaseSchema):
    """Public view of a user, the password hash is never part of it."""

    id: UUID
    email: str
    name: str
    role: UserRole
    created_at: datetime
    updated_at: datetime


class DeletedUserSchema(BaseSchema):
    email: str
    name: str
    role: UserRole


class UserUpdateSchema(BaseSchema):
    email: EmailStr | None = None
    name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=2, max_length=255)
    ] | None = None
    role: UserRole | None = None
