from app.services.errors import ConflictError, NotAuthenticatedError


class UserAlreadyExists(ConflictError):
    detail = "A user with this email is already registered"


class AuthenticationError(NotAuthenticatedError):
    detail = "Authentication failed"


class WrongPasswordError(NotAuthenticatedError):
    detail = "Invalid email or password"
