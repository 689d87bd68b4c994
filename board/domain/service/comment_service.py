"""Comment domain service."""

from collections import defaultdict
from typing import Optional

import logfire

from board.domain.error import ForbiddenError, NotFoundError, ValidationError
from board.domain.event import ChangeNotifier
from board.domain.model.comment import Comment
from board.domain.model.thread import DELETED_AUTHOR, CommentNode
from board.domain.model.user import User
from board.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from board.domain.value import CommentId, PostId, UserId, new_comment_id

from .base import Service

MIN_COMMENT_LENGTH = 2


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        notifier: ChangeNotifier,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository (to check the target post)
            user_repository: User repository (to name authors in threads)
            notifier: Change notifier fired after each mutation
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.notifier = notifier

    def create_comment(
        self,
        actor: User | None,
        post_id: PostId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or a reply to another comment.

        The parent is not looked up: a reply to a missing comment is stored
        as given.

        Args:
            actor: User behind the current session
            post_id: Post ID
            content: Comment text (at least 2 characters)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment with zero votes

        Raises:
            UnauthorizedError: If there is no session
            ValidationError: If content is too short
            NotFoundError: If the post does not exist
        """
        author = self.require_actor(actor, "You must be logged in to comment")

        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            author_id=author.id,
            parent_id=parent_id,
        ):
            if not content or len(content) < MIN_COMMENT_LENGTH:
                raise ValidationError("Comment must be at least 2 characters")

            if self.post_repository.find_by_id(post_id) is None:
                logfire.warn("Comment on non-existent post", post_id=post_id)
                raise NotFoundError("Post", post_id, "Post not found")

            comment = Comment(
                id=new_comment_id(),
                post_id=post_id,
                author_id=author.id,
                content=content,
                parent_id=parent_id or None,
            )
            saved = self.comment_repository.save(comment)

            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                is_reply=saved.parent_id is not None,
            )
            self.notifier.notify()
            return saved

    def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        comment = self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=comment_id)
        return comment

    def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Flat list of a post's comments, newest first."""
        return self.comment_repository.find_by_post(post_id)

    def get_comments_by_author(self, author_id: UserId) -> list[Comment]:
        """A user's comments across all posts, newest first."""
        return self.comment_repository.find_by_author(author_id)

    def delete_comment(self, actor: User | None, comment_id: CommentId) -> None:
        """Delete a single comment. Its replies stay.

        Args:
            actor: User behind the current session
            comment_id: Comment to delete

        Raises:
            UnauthorizedError: If there is no session
            NotFoundError: If the comment does not exist
            ForbiddenError: If the actor is not the author
        """
        requester = self.require_actor(actor, "You must be logged in")

        with logfire.span(
            "comment_service.delete_comment",
            comment_id=comment_id,
            user_id=requester.id,
        ):
            comment = self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id, "Comment not found")
            if comment.author_id != requester.id:
                logfire.warn(
                    "Attempt to delete another user's comment",
                    comment_id=comment_id,
                    user_id=requester.id,
                )
                raise ForbiddenError("You can only delete your own comments")

            self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)
            self.notifier.notify()

    def build_thread(self, post_id: PostId) -> list[CommentNode]:
        """Arrange a post's comments into reply trees.

        Comments are grouped by parent_id. Siblings keep the newest-first
        order of the flat list. Replies whose parent is gone are attached to
        a placeholder node with no comment, placed at top level where the
        first such reply would sort.

        Args:
            post_id: Post ID

        Returns:
            Top-level nodes
        """
        with logfire.span("comment_service.build_thread", post_id=post_id):
            comments = self.comment_repository.find_by_post(post_id)
            present = {c.id for c in comments}

            children: dict[Optional[CommentId], list[Comment]] = defaultdict(list)
            roots: list[CommentId | Comment] = []
            for comment in comments:
                parent = comment.parent_id
                if parent is not None and parent not in present:
                    if parent not in children:
                        roots.append(parent)
                    children[parent].append(comment)
                elif parent is None:
                    roots.append(comment)
                else:
                    children[parent].append(comment)

            usernames: dict[UserId, str] = {}

            def author_name(author_id: UserId) -> str:
                if author_id not in usernames:
                    user = self.user_repository.find_by_id(author_id)
                    usernames[author_id] = user.username if user else DELETED_AUTHOR
                return usernames[author_id]

            def to_node(comment: Comment) -> CommentNode:
                return CommentNode(
                    id=comment.id,
                    comment=comment,
                    author_username=author_name(comment.author_id),
                    replies=[to_node(c) for c in children.get(comment.id, [])],
                )

            thread = []
            for root in roots:
                if isinstance(root, Comment):
                    thread.append(to_node(root))
                else:
                    thread.append(
                        CommentNode(
                            id=root,
                            replies=[to_node(c) for c in children[root]],
                        )
                    )

            logfire.info("Thread built", post_id=post_id, comments=len(comments))
            return thread
