"""In-memory comment repository."""

from typing import Iterable, Optional

from board.domain.model.comment import Comment
from board.domain.repository.comment import CommentRepository
from board.domain.value import CommentId, PostId, UserId


def _newest_first(comments: Iterable[Comment]) -> list[Comment]:
    # Reversed first so comments created in the same clock tick list the later one first
    return sorted(reversed(list(comments)), key=lambda c: c.created_at, reverse=True)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, newest first."""
        return _newest_first(c for c in self._comments.values() if c.post_id == post_id)

    def find_by_author(self, author_id: UserId) -> list[Comment]:
        """Find comments by a specific author."""
        return _newest_first(
            c for c in self._comments.values() if c.author_id == author_id
        )

    def save(self, comment: Comment) -> Comment:
        """Save or replace a comment."""
        self._comments[comment.id] = comment
        return comment

    def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        doomed = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)

    def count(self) -> int:
        return len(self._comments)

    def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    def clear(self) -> None:
        self._comments.clear()
