"""In-memory user repository."""

from typing import Optional

from board.domain.model.user import User
from board.domain.repository.user import UserRepository
from board.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username, ignoring case."""
        wanted = username.lower()
        for user in self._users.values():
            if user.username.lower() == wanted:
                return user
        return None

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        wanted = email.lower()
        for user in self._users.values():
            if user.email.lower() == wanted:
                return user
        return None

    def find_all(self) -> list[User]:
        return list(self._users.values())

    def save(self, user: User) -> User:
        """Save or replace a user."""
        self._users[user.id] = user
        return user

    def count(self) -> int:
        return len(self._users)

    def clear(self) -> None:
        self._users.clear()
