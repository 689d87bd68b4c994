"""Session entity."""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.model.user import User
from board.domain.value import SessionToken


class Session(DomainModel):
    """An authenticated identity and the bearer token that represents it."""

    token: SessionToken
    user: User
    created_at: datetime = Field(default_factory=datetime.now)
