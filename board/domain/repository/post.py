"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.post import Post
from board.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Listings are always ordered newest first.
    """

    @abstractmethod
    def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Post]:
        """Return every post, newest first."""
        pass

    @abstractmethod
    def find_by_author(self, author_id: UserId) -> list[Post]:
        """Find posts by a specific author, newest first.

        Args:
            author_id: The author's user ID

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    def save(self, post: Post) -> Post:
        """Save a post (create or replace).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    def delete(self, post_id: PostId) -> None:
        """Delete a post.

        Does not touch the post's comments; callers cascade explicitly.

        Args:
            post_id: The post ID to delete
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Count posts."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every post."""
        pass
