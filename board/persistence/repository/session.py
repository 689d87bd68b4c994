"""In-memory session repository."""

from typing import Optional

from board.domain.repository.session import SessionRepository
from board.domain.value import SessionToken, UserId


class InMemorySessionRepository(SessionRepository):
    """Token to user ID map."""

    def __init__(self) -> None:
        self._sessions: dict[str, UserId] = {}

    def save(self, token: SessionToken, user_id: UserId) -> None:
        self._sessions[token.root] = user_id

    def find_user_id(self, token: SessionToken) -> Optional[UserId]:
        return self._sessions.get(token.root)

    def delete(self, token: SessionToken) -> bool:
        return self._sessions.pop(token.root, None) is not None

    def count(self) -> int:
        return len(self._sessions)

    def clear(self) -> None:
        self._sessions.clear()
