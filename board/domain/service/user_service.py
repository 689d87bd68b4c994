"""User domain service."""

import logfire

from board.domain.model.user import User
from board.domain.repository import UserRepository
from board.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        user = self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.warn("User not found", user_id=user_id)
        return user
