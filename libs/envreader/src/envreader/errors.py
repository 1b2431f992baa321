"""Errors raised by envreader and their standard report shape."""

from __future__ import annotations

from pydantic import BaseModel


class MissingConfigError(LookupError):
    """A required environment variable is not set and has no default."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Environment variable {name!r} is not set and no default value was provided"
        )


class ErrorDetail(BaseModel):
    code: str
    message: str
    variable: str | None = None


class ErrorResponse(BaseModel):
    error: ErrorDetail


def error_report(exc: Exception) -> ErrorResponse:
    """Build a standardized error report for an exception."""
    if isinstance(exc, MissingConfigError):
        detail = ErrorDetail(code="missing_config", message=str(exc), variable=exc.name)
    else:
        detail = ErrorDetail(code="internal_error", message=str(exc))
    return ErrorResponse(error=detail)
