import contextlib
import logging
from datetime import UTC, datetime
from uuid import UUID

from dishka import Provider, Scope, provide
from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import User
from app.schemas.users import DeletedUserSchema, UserRetrieveSchema, UserUpdateSchema
from app.services.errors import BaseServiceError
from app.services.filters import FilterType
from app.services.users.errors import EmailAlreadyExistsError, UserNotFoundError

logger = logging.getLogger(__name__)

PUBLIC_COLUMNS = (
    User.id,
    User.email,
    User.name,
    User.role,
    User.created_at,
    User.updated_at,
)
DELETED_COLUMNS = (User.email, User.name, User.role)


@contextlib.contextmanager
def log_failure(message: str, *args):
    """Log a failed operation and let the error propagate unchanged."""
    try:
        yield
    except BaseServiceError as exc:
        logger.error(message + ": %s", *args, exc.detail)
        raise
    except Exception:
        logger.exception(message, *args)
        raise


class RetrieveUserInteractor:
    """ORM-level lookups used by authentication."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def exists(self, query: FilterType) -> bool:
        value = await self.session.scalar(exists(User).where(query).select())
        return bool(value)

    async def get(self, query: FilterType) -> User | None:
        return await self.session.scalar(select(User).where(query).limit(1))


class UserService:
    """CRUD over the users table.

    Every operation returns a safe-field projection and never loads the
    password column. Failures are logged with the operation context and
    re-raised unchanged; mapping them to HTTP responses is left to the
    exception handlers.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def all(self) -> list[UserRetrieveSchema]:
        with log_failure("Error fetching all users"):
            result = await self.session.execute(select(*PUBLIC_COLUMNS))
            return [
                UserRetrieveSchema.model_validate(dict(row))
                for row in result.mappings()
            ]

    async def get_by_id(self, user_id: UUID) -> UserRetrieveSchema:
        with log_failure("Error getting user by id %s", user_id):
            result = await self.session.execute(
                select(*PUBLIC_COLUMNS).where(User.id == user_id).limit(1)
            )
            row = result.mappings().first()
            if row is None:
                raise UserNotFoundError()
            return UserRetrieveSchema.model_validate(dict(row))

    async def update(
        self, user_id: UUID, data: UserUpdateSchema
    ) -> UserRetrieveSchema:
        with log_failure("Error updating user %s", user_id):
            values = data.model_dump(exclude_unset=True, exclude_none=True)
            email = values.get("email")
            if email is not None and await self._email_taken(email, user_id):
                if not await self._exists(user_id):
                    raise UserNotFoundError()
                raise EmailAlreadyExistsError()

            values["updated_at"] = datetime.now(UTC)
            statement = (
                update(User)
                .where(User.id == user_id)
                .values(**values)
                .returning(*PUBLIC_COLUMNS)
                .execution_options(synchronize_session=False)
            )
            try:
                result = await self.session.execute(statement)
            except IntegrityError:
                # the email was claimed between the check and the update
                await self.session.rollback()
                raise EmailAlreadyExistsError()

            row = result.mappings().first()
            if row is None:
                raise UserNotFoundError()
            await self.session.commit()

            user = UserRetrieveSchema.model_validate(dict(row))
            logger.info("User %s updated successfully", user.email)
            return user

    async def delete(self, user_id: UUID) -> DeletedUserSchema:
        with log_failure("Error deleting user %s", user_id):
            result = await self.session.execute(
                delete(User)
                .where(User.id == user_id)
                .returning(*DELETED_COLUMNS)
                .execution_options(synchronize_session=False)
            )
            row = result.mappings().first()
            if row is None:
                raise UserNotFoundError()
            await self.session.commit()

            user = DeletedUserSchema.model_validate(dict(row))
            logger.info("User %s deleted successfully", user.email)
            return user

    async def _exists(self, user_id: UUID) -> bool:
        return bool(
            await self.session.scalar(exists(User).where(User.id == user_id).select())
        )

    async def _email_taken(self, email: str, user_id: UUID) -> bool:
        return bool(
            await self.session.scalar(
                exists(User).where(User.email == email, User.id != user_id).select()
            )
        )


class UserServicesProvider(Provider):
    scope = Scope.REQUEST

    retrieve = provide(RetrieveUserInteractor)
    service = provide(UserService)
