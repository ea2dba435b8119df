"""
Custom Exceptions

This module defines custom exceptions for the redirect service.
Every exception carries the HTTP status code and plain-text body it is
rendered with, so handlers stay generic.

Benefits:
- Specific error types for validation and lookup failures
- Plain-text error bodies for API consumers
- Store failures are not wrapped and propagate to the ASGI runtime
"""

from fastapi import Request, status
from fastapi.responses import PlainTextResponse

from redirector.core.validators import ValidationFailure


class RedirectorException(Exception):
    """Base exception for the redirect service."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidRequestError(RedirectorException):
    """Raised when request input fails boundary validation."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, failure: ValidationFailure):
        self.failure = failure
        super().__init__(failure.message)


class MappingNotFoundError(RedirectorException):
    """Raised when no redirect mapping exists for a requested path."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, short_path: str):
        self.short_path = short_path
        super().__init__("Not Found")


async def redirector_exception_handler(
    request: Request,
    exc: RedirectorException
) -> PlainTextResponse:
    """Render a RedirectorException as a plain-text response."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)
