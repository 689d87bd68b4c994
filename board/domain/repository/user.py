"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.user import User
from board.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user storage operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username, ignoring case.

        Args:
            username: Username to look up

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case.

        Args:
            email: Email address to look up

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every user in insertion order."""
        pass

    @abstractmethod
    def save(self, user: User) -> User:
        """Save a user (create or replace).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Count users."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every user."""
        pass
