"""Discriminated result returned by the in-process store."""

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from board.domain.error import (
    DomainError,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

T = TypeVar("T")


class ErrorType(str, Enum):
    """Kind of failure carried by a failed result."""

    VALIDATION = "validation"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    DOMAIN = "domain"

    @classmethod
    def of(cls, error: DomainError) -> "ErrorType":
        """Classify a domain error."""
        for error_class, error_type in _ERROR_TYPES:
            if isinstance(error, error_class):
                return error_type
        return cls.DOMAIN


_ERROR_TYPES: list[tuple[type[DomainError], ErrorType]] = [
    (ValidationError, ErrorType.VALIDATION),
    (InvalidCredentialsError, ErrorType.INVALID_CREDENTIALS),
    (UnauthorizedError, ErrorType.UNAUTHORIZED),
    (ForbiddenError, ErrorType.FORBIDDEN),
    (NotFoundError, ErrorType.NOT_FOUND),
]


class Result(BaseModel, Generic[T]):
    """Outcome of a store mutation.

    Either ``success`` is True and ``value`` holds the created or updated
    entity (None for deletes and logout), or ``success`` is False and
    ``error`` holds the message of the first rule that failed.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_type: Optional[ErrorType] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: DomainError) -> "Result[T]":
        return cls(success=False, error=str(error), error_type=ErrorType.of(error))
