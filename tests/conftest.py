import asyncio
from pathlib import Path
from typing import AsyncIterator, Callable, Iterator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.app import create_app
from app.core.db import create_schema, new_engine, new_session_maker
from app.models import User
from app.models.enums import UserRole
from app.settings.app import AppSettings
from app.settings.db import DatabaseSettings


@pytest.fixture()
def settings() -> AppSettings:
    return AppSettings(
        jwt_secret="tests-secret-key-with-enough-bytes-for-hs256",
        bcrypt_rounds=4,
        create_schema=True,
    )


@pytest.fixture()
def db_settings(tmp_path: Path) -> DatabaseSettings:
    return DatabaseSettings(dsn=f"sqlite+aiosqlite:///{tmp_path / 'users.sqlite3'}")


@pytest.fixture()
def client(settings: AppSettings, db_settings: DatabaseSettings) -> Iterator[TestClient]:
    app = create_app(settings, db_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture()
async def session(db_settings: DatabaseSettings) -> AsyncIterator[AsyncSession]:
    engine = new_engine(db_settings)
    await create_schema(engine)
    async with new_session_maker(engine)() as db_session:
        yield db_session
    await engine.dispose()


@pytest.fixture()
def make_admin(db_settings: DatabaseSettings) -> Callable[[str], None]:
    """Promote an existing account; sign-up only creates regular users."""

    async def promote(email: str) -> None:
        engine = new_engine(db_settings)
        async with engine.begin() as conn:
            await conn.execute(
                update(User).where(User.email == email).values(role=UserRole.ADMIN)
            )
        await engine.dispose()

    return lambda email: asyncio.run(promote(email))
