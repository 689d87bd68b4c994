"""Session repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.value import SessionToken, UserId


class SessionRepository(ABC):
    """Token to user mapping for bearer authentication.

    Tokens never expire; they live until logout or reset.
    """

    @abstractmethod
    def save(self, token: SessionToken, user_id: UserId) -> None:
        """Map a token to a user.

        Args:
            token: Issued session token
            user_id: Owner of the token
        """
        pass

    @abstractmethod
    def find_user_id(self, token: SessionToken) -> Optional[UserId]:
        """Look up the user a token belongs to.

        Args:
            token: Session token

        Returns:
            The user ID if the token is known, None otherwise
        """
        pass

    @abstractmethod
    def delete(self, token: SessionToken) -> bool:
        """Forget a token.

        Args:
            token: Session token

        Returns:
            True if the token existed
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Count live tokens."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Forget every token."""
        pass
