from fastapi import APIRouter
from dishka.integrations.fastapi import DishkaRoute

from app.schemas.health import HealthSchema
from app.routes.auth import router as auth_router
from app.routes.users import router as users_router


router = APIRouter(route_class=DishkaRoute)
router.include_router(auth_router)
router.include_router(users_router)


@router.get("/health")
async def health() -> HealthSchema:
    return HealthSchema(status="ok")
