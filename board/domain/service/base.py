"""Base service class for domain services."""

from board.domain.error import UnauthorizedError
from board.domain.model.user import User


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    @staticmethod
    def require_actor(actor: User | None, message: str) -> User:
        """Return the acting user or raise if there is no session.

        Args:
            actor: User behind the current session, if any
            message: Error message for the unauthenticated case

        Raises:
            UnauthorizedError: If actor is None
        """
        if actor is None:
            raise UnauthorizedError(message)
        return actor
