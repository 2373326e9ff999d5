"""API error hierarchy."""

from fastapi.exceptions import RequestValidationError

from srtresync.core.validation import ValidationError


class ApiError(Exception):
    """Base API error with HTTP status code and structured detail."""

    def __init__(
        self,
        *,
        status_code: int,
        code: str,
        message: str,
        detail: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        self.detail = detail
        super().__init__(message)


class InputRejectedError(ApiError):
    """Raised when an uploaded file or offset fails validation."""

    def __init__(self, error: ValidationError, *, field: str) -> None:
        super().__init__(
            status_code=422,
            code=error.code,
            message=error.message,
            detail=f"field: {field}",
        )
        self.field = field


class InvalidRequestError(ApiError):
    """Raised when the request body or form fails schema validation."""

    def __init__(self, error: RequestValidationError) -> None:
        problems = [
            f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
            for item in error.errors()
        ]
        super().__init__(
            status_code=422,
            code="invalid_request",
            message="Request is missing fields or has invalid values.",
            detail="; ".join(problems) or None,
        )
