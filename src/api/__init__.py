# API support package

from src.api.errors import ErrorResponse, create_error_response, create_unexpected_error_response

__all__ = [
    "ErrorResponse",
    "create_error_response",
    "create_unexpected_error_response",
]
