"""Vote domain service."""

import logfire

from board.domain.error import NotFoundError, ValidationError
from board.domain.event import ChangeNotifier
from board.domain.model.comment import Comment
from board.domain.model.post import Post
from board.domain.model.user import User
from board.domain.repository import CommentRepository, PostRepository
from board.domain.value import CommentId, PostId, VotableType, VoteType

from .base import Service


class VoteService(Service):
    """Domain service for vote operations.

    A user holds at most one vote per post or comment. Repeating a vote
    undoes it; voting the other way switches it.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        notifier: ChangeNotifier,
    ) -> None:
        """Initialize vote service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
            notifier: Change notifier fired after each vote
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.notifier = notifier

    def vote_post(
        self, actor: User | None, post_id: PostId, vote_type: VoteType | str
    ) -> Post:
        """Toggle the actor's vote on a post.

        Args:
            actor: User behind the current session
            post_id: Post ID
            vote_type: "up" or "down"

        Returns:
            Post with updated counters

        Raises:
            UnauthorizedError: If there is no session
            NotFoundError: If the post does not exist
            ValidationError: If vote_type is not "up" or "down"
        """
        voter = self.require_actor(actor, "You must be logged in to vote")

        with logfire.span("vote_post", post_id=post_id, user_id=voter.id):
            post = self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Vote on non-existent post", post_id=post_id)
                raise NotFoundError("Post", post_id, "Post not found")

            direction = self._parse_vote_type(vote_type)
            updated = self.post_repository.save(post.with_vote(voter.id, direction))

            self._log_vote(VotableType.POST, post_id, voter, direction, updated)
            self.notifier.notify()
            return updated

    def vote_comment(
        self, actor: User | None, comment_id: CommentId, vote_type: VoteType | str
    ) -> Comment:
        """Toggle the actor's vote on a comment.

        Args:
            actor: User behind the current session
            comment_id: Comment ID
            vote_type: "up" or "down"

        Returns:
            Comment with updated counters

        Raises:
            UnauthorizedError: If there is no session
            NotFoundError: If the comment does not exist
            ValidationError: If vote_type is not "up" or "down"
        """
        voter = self.require_actor(actor, "You must be logged in to vote")

        with logfire.span("vote_comment", comment_id=comment_id, user_id=voter.id):
            comment = self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Vote on non-existent comment", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id, "Comment not found")

            direction = self._parse_vote_type(vote_type)
            updated = self.comment_repository.save(
                comment.with_vote(voter.id, direction)
            )

            self._log_vote(VotableType.COMMENT, comment_id, voter, direction, updated)
            self.notifier.notify()
            return updated

    @staticmethod
    def _parse_vote_type(vote_type: VoteType | str) -> VoteType:
        try:
            return VoteType(vote_type)
        except ValueError:
            raise ValidationError("Vote type must be 'up' or 'down'")

    @staticmethod
    def _log_vote(
        votable_type: VotableType,
        votable_id: str,
        voter: User,
        direction: VoteType,
        updated: Post | Comment,
    ) -> None:
        state = updated.voted_by.get(voter.id)
        logfire.info(
            "Vote recorded" if state is not None else "Vote removed",
            votable_type=votable_type.value,
            votable_id=votable_id,
            user_id=voter.id,
            requested=direction.value,
            upvotes=updated.upvotes,
            downvotes=updated.downvotes,
        )
