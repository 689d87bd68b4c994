"""Interface layer errors.

Maps domain errors to HTTP status codes. Response bodies are always
``{"error": message}``.
"""

from fastapi import status

from board.domain.error import (
    DomainError,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

INVALID_REQUEST_MESSAGE = "Invalid request"

_STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def status_code_for(error: DomainError) -> int:
    """HTTP status code for a domain error (400 for unrecognised ones)."""
    for error_class, code in _STATUS_CODES:
        if isinstance(error, error_class):
            return code
    return status.HTTP_400_BAD_REQUEST


def error_body(message: str) -> dict[str, str]:
    return {"error": message}
