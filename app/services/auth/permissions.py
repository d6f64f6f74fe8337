from uuid import UUID

from app.models import User
from app.models.enums import UserRole
from app.schemas.users import UserUpdateSchema
from app.services.errors import PermissionDeniedError


def ensure_can_manage(current_user: User, user_id: UUID) -> None:
    """Users may manage their own account, admins may manage any."""
    if current_user.role != UserRole.ADMIN and current_user.id != user_id:
        raise PermissionDeniedError("You can only manage your own account")


def ensure_can_update(current_user: User, user_id: UUID, data: UserUpdateSchema) -> None:
    ensure_can_manage(current_user, user_id)
    if data.role is not None and current_user.role != UserRole.ADMIN:
        raise PermissionDeniedError("Only admins can change user roles")
