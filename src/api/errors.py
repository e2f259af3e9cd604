"""Structured error response models for consistent API error handling."""

import traceback
from typing import Any

from pydantic import BaseModel, ConfigDict

from src.core.errors import RelayError


class ErrorResponse(BaseModel):
    """
    Standardized error response schema.

    Error-specific diagnostic fields (status, details, available_repositories,
    ...) are carried as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    error: str
    message: str | None = None
    stack: str | None = None


def _format_stack(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def create_error_response(exc: RelayError, include_stack: bool = False) -> ErrorResponse:
    """Create the response for a relay error; stack traces only for server errors."""
    response = ErrorResponse(**exc.to_dict())
    if include_stack and exc.status_code >= 500:
        response.stack = _format_stack(exc)
    return response


def create_unexpected_error_response(exc: Exception, include_stack: bool = False) -> ErrorResponse:
    """Create the response for an exception no stage anticipated."""
    return ErrorResponse(
        error="Server error",
        message=str(exc) or "Unknown error occurred",
        stack=_format_stack(exc) if include_stack else None,
    )


def render_error(response: ErrorResponse) -> dict[str, Any]:
    return response.model_dump(exclude_none=True)
