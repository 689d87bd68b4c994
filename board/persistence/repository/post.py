"""In-memory post repository."""

from typing import Iterable, Optional

from board.domain.model.post import Post
from board.domain.repository.post import PostRepository
from board.domain.value import PostId, UserId


def _newest_first(posts: Iterable[Post]) -> list[Post]:
    # Reversed first so posts created in the same clock tick list the later one first
    return sorted(reversed(list(posts)), key=lambda p: p.created_at, reverse=True)


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    def find_all(self) -> list[Post]:
        """Find all posts, newest first."""
        return _newest_first(self._posts.values())

    def find_by_author(self, author_id: UserId) -> list[Post]:
        """Find posts by a specific author."""
        return _newest_first(p for p in self._posts.values() if p.author_id == author_id)

    def save(self, post: Post) -> Post:
        """Save or replace a post."""
        self._posts[post.id] = post
        return post

    def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)

    def count(self) -> int:
        return len(self._posts)

    def clear(self) -> None:
        self._posts.clear()
