from app.services.errors import ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    detail = "User not found"


class EmailAlreadyExistsError(ConflictError):
    detail = "Email already exists"
