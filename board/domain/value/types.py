"""Domain value objects for the board.

Value objects are immutable and defined by their values, not identity.
"""

import re
from datetime import datetime
from enum import Enum

from pydantic import field_validator

from board.domain.value.common import RootValueObject
from board.domain.value.identifiers import UserId


class VoteType(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class AvatarColor(RootValueObject[str]):
    """Avatar colour tag, a ``#RRGGBB`` hex string."""

    @field_validator("root")
    @classmethod
    def validate_hex_color(cls, v: str) -> str:
        """Validate colour format."""
        if not re.match(r"^#[0-9A-Fa-f]{6}$", v):
            raise ValueError("Avatar color must be a #RRGGBB hex string")
        return v


class SessionToken(RootValueObject[str]):
    """Bearer token of the form ``token-<userId>-<unix millis>``.

    Tokens are opaque to clients and never expire.
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token prefix."""
        if not v.startswith("token-"):
            raise ValueError("Session token must start with 'token-'")
        return v

    @classmethod
    def issue(cls, user_id: UserId, issued_at: datetime | None = None) -> "SessionToken":
        """Issue a token for a user.

        Tokens are only unique per user and millisecond: two sessions of the
        same user opened in the same millisecond share one token, and
        closing either one closes both.
        """
        issued_at = issued_at or datetime.now()
        return cls(f"token-{user_id}-{int(issued_at.timestamp() * 1000)}")
