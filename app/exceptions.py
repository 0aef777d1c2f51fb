from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class of every error surfaced to API clients.

    Attributes:
        message: human-readable message shown inline to the user
        details: optional mapping with extra context (field errors, ids)
        code: machine-readable error code used in the response envelope
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Unexpected error"
    default_code = "APP_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when a required field is empty or malformed."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "SERVICE_VALIDATION_ERROR"


class UnauthorizedError(AppError):
    """Raised when a mutating action is attempted without an acting user."""

    http_status = 401
    default_message = "Please log in"
    default_code = "UNAUTHENTICATED"


class ForbiddenError(AppError):
    """Raised when the acting user does not own the targeted resource."""

    http_status = 403
    default_message = "Not allowed"
    default_code = "FORBIDDEN"


class NotFoundError(AppError):
    """Raised when a referenced recipe or user is absent."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class ConflictError(AppError):
    """Raised on duplicates (e.g. an existing subscriber) or a busy form."""

    http_status = 409
    default_message = "Conflict"
    default_code = "CONFLICT"


class BackendWriteError(AppError):
    """Raised when the relational backend rejects a write."""

    http_status = 502
    default_message = "Failed to save changes"
    default_code = "BACKEND_WRITE_FAILED"


class UploadError(AppError):
    """Raised when an image could not be stored."""

    http_status = 502
    default_message = "Image upload failed"
    default_code = "UPLOAD_FAILED"
