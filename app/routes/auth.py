from typing import Annotated

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter, Response
from fastapi.params import Body
from starlette import status

from app.models import User
from app.schemas.auth import (
    AuthenticationResponseSchema,
    LoginSchema,
    RegisterSchema,
    SignOutResponseSchema,
    UserPrincipal,
)
from app.schemas.users import UserRetrieveSchema
from app.services.auth import LoginUserInteractor, RegisterUserInteractor
from app.services.providers.protocols.token_provider import ITokenProvider
from app.settings.app import AppSettings

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


def authenticate(
    user: User,
    response: Response,
    token_encoder: ITokenProvider,
    settings: AppSettings,
) -> AuthenticationResponseSchema:
    access_token = token_encoder.encode_token(
        UserPrincipal(user_id=user.id, role=user.role)
    )
    response.set_cookie(
        key=settings.token_cookie_name,
        value=access_token,
        max_age=settings.jwt_expire_minutes * 60,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )
    return AuthenticationResponseSchema(
        user=UserRetrieveSchema.model_validate(user),
        access_token=access_token,
    )


@router.post("/sign-up", status_code=status.HTTP_201_CREATED)
async def sign_up(
    data: RegisterSchema,
    response: Response,
    service: FromDishka[RegisterUserInteractor],
    token_encoder: FromDishka[ITokenProvider],
    settings: FromDishka[AppSettings],
) -> AuthenticationResponseSchema:
    user = await service(data)
    return authenticate(user, response, token_encoder, settings)


@router.post("/sign-in")
async def sign_in(
    data: Annotated[LoginSchema, Body()],
    response: Response,
    service: FromDishka[LoginUserInteractor],
    token_encoder: FromDishka[ITokenProvider],
    settings: FromDishka[AppSettings],
) -> AuthenticationResponseSchema:
    user = await service(data)
    return authenticate(user, response, token_encoder, settings)


@router.post("/sign-out")
async def sign_out(
    response: Response,
    settings: FromDishka[AppSettings],
) -> SignOutResponseSchema:
    response.delete_cookie(
        key=settings.token_cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )
    return SignOutResponseSchema(detail="Signed out successfully")
