class BaseServiceError(Exception):
    detail: str = "Unknown service error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.detail
        super().__init__(self.detail)


class NotAuthenticatedError(BaseServiceError):
    detail = "You are not authenticated"


class PermissionDeniedError(BaseServiceError):
    detail = "You do not have permission to perform this action"


class NotFoundError(BaseServiceError):
    detail = "Object not found"


class ConflictError(BaseServiceError):
    detail = "Object already exists"
