from uuid import UUID

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter

from app.deps.auth import CurrentUser, CurrentUserDependency
from app.schemas.users import DeletedUserSchema, UserRetrieveSchema, UserUpdateSchema
from app.services.auth.permissions import ensure_can_manage, ensure_can_update
from app.services.users import UserService

router = APIRouter(
    prefix="/users",
    tags=["users"],
    route_class=DishkaRoute,
    dependencies=[CurrentUserDependency],
)


@router.get("")
async def list_users(service: FromDishka[UserService]) -> list[UserRetrieveSchema]:
    return await service.all()


@router.get("/{user_id}")
async def get_user(
    user_id: UUID, service: FromDishka[UserService]
) -> UserRetrieveSchema:
    return await service.get_by_id(user_id)


@router.patch("/{user_id}")
async def update_user(
    user_id: UUID,
    data: UserUpdateSchema,
    current_user: CurrentUser,
    service: FromDishka[UserService],
) -> UserRetrieveSchema:
    ensure_can_update(current_user, user_id, data)
    return await service.update(user_id, data)


@router.delete("/{user_id}")
async def delete_user(
    user_id: UUID,
    current_user: CurrentUser,
    service: FromDishka[UserService],
) -> DeletedUserSchema:
    ensure_can_manage(current_user, user_id)
    return await service.delete(user_id)
