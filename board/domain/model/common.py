"""Base models for domain entities."""

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

from board.domain.value import UserId, VoteType


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


V = TypeVar("V", bound="Votable")


class Votable(DomainModel):
    """Base for entities users can vote on (posts and comments).

    Counters and ``voted_by`` move together: ``upvotes`` is always the number
    of "up" entries cast through ``with_vote`` plus any seeded baseline, and
    likewise for ``downvotes``.
    """

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    voted_by: dict[UserId, VoteType] = Field(default_factory=dict)

    @property
    def score(self) -> int:
        """Net score shown next to the item."""
        return self.upvotes - self.downvotes

    def with_vote(self: V, user_id: UserId, vote_type: VoteType) -> V:
        """Return a copy with the user's vote toggled.

        Voting the same direction twice removes the vote. Voting the other
        direction moves the user's vote from one counter to the other.

        Args:
            user_id: Voter
            vote_type: Requested direction

        Returns:
            Updated copy of this entity
        """
        counts = {VoteType.UP: self.upvotes, VoteType.DOWN: self.downvotes}
        voted_by = dict(self.voted_by)
        current = voted_by.get(user_id)

        if current == vote_type:
            counts[vote_type] -= 1
            del voted_by[user_id]
        else:
            if current is not None:
                counts[current] -= 1
            counts[vote_type] += 1
            voted_by[user_id] = vote_type

        return self.model_copy(
            update={
                "upvotes": counts[VoteType.UP],
                "downvotes": counts[VoteType.DOWN],
                "voted_by": voted_by,
            }
        )
