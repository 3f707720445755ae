from __future__ import annotations
from typing import Any


class ApiError(Exception):
    """Base of the error taxonomy; every handler failure ends up as one of these."""
    status = 500
    code = "internal"
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, *, detail: Any = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.detail = detail

    def to_dict(self) -> dict:
        body = {"error": self.code, "message": self.message}
        if self.detail is not None:
            body["detail"] = self.detail
        return body


class Unauthenticated(ApiError):
    status = 401
    code = "unauthenticated"
    default_message = "Not authenticated"


class Forbidden(ApiError):
    status = 403
    code = "forbidden"
    default_message = "Access denied"


class NotFound(ApiError):
    status = 404
    code = "not_found"
    default_message = "Not found"


class ValidationFailed(ApiError):
    status = 400
    code = "validation"
    default_message = "Missing required fields"


class Conflict(ApiError):
    status = 409
    code = "conflict"
    default_message = "Unique constraint violation"


class TooManyAttempts(ApiError):
    status = 429
    code = "too_many_attempts"
    default_message = "Too many login attempts, try again later"


class Internal(ApiError):
    pass
