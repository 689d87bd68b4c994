"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    The message describes the first rule that failed.
    """

    pass


class InvalidCredentialsError(DomainError):
    """Raised when no account matches a username/password pair."""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


class UnauthorizedError(DomainError):
    """Raised when an operation needs a session and none is active."""

    def __init__(self, message: str = "You must be logged in"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when a user attempts to delete content they don't own."""

    def __init__(self, message: str):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found")
