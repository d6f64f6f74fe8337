from typing import Annotated

from pydantic import AliasChoices, EmailStr, Field, StringConstraints

from app.models.enums import UserRole
from app.schemas.base import BaseSchema
from app.schemas.users import UserRetrieveSchema
from uuid import UUID


Password = Annotated[str, StringConstraints(min_length=6, max_length=72)]
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=255)]


class UserPrincipal(BaseSchema):
    user_id: UUID = Field(validation_alias=AliasChoices("user_id", "id"))
    role: UserRole


class AuthenticationResponseSchema(BaseSchema):
    access_token: str
    user: UserRetrieveSchema


class RegisterSchema(BaseSchema):
    email: EmailStr
    name: Name
    password: Password


class LoginSchema(BaseSchema):
    email: EmailStr = Field(validation_alias=AliasChoices("email", "username"))
    password: str


class SignOutResponseSchema(BaseSchema):
    detail: str
