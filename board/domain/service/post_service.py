"""Post domain service."""

import logfire

from board.domain.error import ForbiddenError, NotFoundError, ValidationError
from board.domain.event import ChangeNotifier
from board.domain.model.post import Post
from board.domain.model.user import User
from board.domain.repository import CommentRepository, PostRepository
from board.domain.value import PostId, UserId, new_post_id

from .base import Service

MIN_TITLE_LENGTH = 5
MIN_CONTENT_LENGTH = 10


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        notifier: ChangeNotifier,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (for cascades and counts)
            notifier: Change notifier fired after each mutation
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.notifier = notifier

    def create_post(self, actor: User | None, title: str, content: str) -> Post:
        """Create a post authored by the acting user.

        Args:
            actor: User behind the current session
            title: Post title (at least 5 characters)
            content: Post body (at least 10 characters)

        Returns:
            Created post with zero votes

        Raises:
            UnauthorizedError: If there is no session
            ValidationError: If title or content is too short
        """
        author = self.require_actor(actor, "You must be logged in to create a post")

        with logfire.span("post_service.create_post", author_id=author.id):
            if not title or len(title) < MIN_TITLE_LENGTH:
                raise ValidationError("Title must be at least 5 characters")
            if not content or len(content) < MIN_CONTENT_LENGTH:
                raise ValidationError("Content must be at least 10 characters")

            post = Post(
                id=new_post_id(),
                title=title,
                content=content,
                author_id=author.id,
            )
            saved = self.post_repository.save(post)

            logfire.info("Post created", post_id=saved.id, author_id=author.id)
            self.notifier.notify()
            return saved

    def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        post = self.post_repository.find_by_id(post_id)
        if post is None:
            logfire.warn("Post not found", post_id=post_id)
        return post

    def list_posts(self) -> list[Post]:
        """List every post, newest first."""
        return self.post_repository.find_all()

    def list_posts_by_author(self, author_id: UserId) -> list[Post]:
        """List a user's posts, newest first."""
        return self.post_repository.find_by_author(author_id)

    def delete_post(self, actor: User | None, post_id: PostId) -> None:
        """Delete a post and every comment on it.

        Args:
            actor: User behind the current session
            post_id: Post to delete

        Raises:
            UnauthorizedError: If there is no session
            NotFoundError: If the post does not exist
            ForbiddenError: If the actor is not the author
        """
        requester = self.require_actor(actor, "You must be logged in")

        with logfire.span(
            "post_service.delete_post", post_id=post_id, user_id=requester.id
        ):
            post = self.post_repository.find_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", post_id, "Post not found")
            if post.author_id != requester.id:
                logfire.warn(
                    "Attempt to delete another user's post",
                    post_id=post_id,
                    user_id=requester.id,
                )
                raise ForbiddenError("You can only delete your own posts")

            removed = self.comment_repository.delete_by_post(post_id)
            self.post_repository.delete(post_id)

            logfire.info("Post deleted", post_id=post_id, comments_removed=removed)
            self.notifier.notify()

    def count_comments(self, post_id: PostId) -> int:
        """Number of comments (including replies) on a post."""
        return self.comment_repository.count_by_post(post_id)
