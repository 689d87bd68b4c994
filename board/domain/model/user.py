"""User aggregate root.

Passwords are stored in plain text: the board is a practice target for test
automation, not a real account system.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import AvatarColor, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: str
    email: str
    password: str
    avatar: AvatarColor
    created_at: datetime = Field(default_factory=datetime.now)
