import contextlib
import logging

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.db import create_schema
from app.core.logging import setup_logging
from app.deps import create_container
from app.routes import router as api_router
from app.services.exception_handler import register_exception_handlers
from app.settings.app import AppSettings
from app.settings.db import DatabaseSettings


logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    container: AsyncContainer = app.state.dishka_container
    settings = await container.get(AppSettings)
    if settings.create_schema:
        engine = await container.get(AsyncEngine)
        await create_schema(engine)
        logger.info("Database schema created")
    yield
    await container.close()


def create_app(
    settings: AppSettings | None = None,
    db_settings: DatabaseSettings | None = None,
) -> FastAPI:
    settings = settings or AppSettings()
    db_settings = db_settings or DatabaseSettings()
    setup_logging(settings.log_level)

    container = create_container(settings, db_settings)
    app = FastAPI(lifespan=lifespan, title=settings.app_name)
    register_exception_handlers(app)
    setup_dishka(container, app=app)
    app.include_router(api_router)
    return app
