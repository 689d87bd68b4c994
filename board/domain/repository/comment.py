"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.comment import Comment
from board.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Listings are always ordered newest first.
    """

    @abstractmethod
    def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments on a post, newest first.

        Args:
            post_id: The post ID

        Returns:
            Flat list of comments (top-level and replies)
        """
        pass

    @abstractmethod
    def find_by_author(self, author_id: UserId) -> list[Comment]:
        """Find comments by a specific author, newest first.

        Args:
            author_id: The author's user ID

        Returns:
            List of comments by the author
        """
        pass

    @abstractmethod
    def save(self, comment: Comment) -> Comment:
        """Save a comment (create or replace).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    def delete(self, comment_id: CommentId) -> None:
        """Delete a single comment. Replies are left in place.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Count all comments."""
        pass

    @abstractmethod
    def count_by_post(self, post_id: PostId) -> int:
        """Count comments on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments with that post ID
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every comment."""
        pass
