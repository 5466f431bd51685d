# directory_api/core/exceptions.py

class AppError(Exception):
    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(AppError):
    def __init__(self, message: str = "Invalid input") -> None:
        super().__init__(message, status_code=400)


class ConflictError(AppError):
    """Uniqueness violation among live records. `field` names the offending column."""

    def __init__(self, message: str | None = None, *, field: str | None = None) -> None:
        if message is None:
            message = f"{field} already exists" if field else "Conflict"
        super().__init__(message, status_code=400)
        self.field = field


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=404)


class PersistenceError(AppError):
    def __init__(self, message: str = "Database error", *, detail: str | None = None) -> None:
        super().__init__(message, status_code=500)
        self.detail = detail
