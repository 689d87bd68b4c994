"""In-process store.

The store is what a UI talks to: it remembers who is logged in, runs every
operation through the domain services, and reports failures as ``Result``
values instead of exceptions. Listeners registered with ``subscribe`` run
after every successful mutation, including mutations made through the HTTP
API, since both share one ``ChangeNotifier``.
"""

from typing import Callable, Optional, TypeVar

import logfire

from board.application.result import Result
from board.domain.error import DomainError
from board.domain.event import ChangeNotifier, Listener, Unsubscribe
from board.domain.model import Comment, CommentNode, Post, Session, User
from board.domain.service import (
    AdminService,
    AuthService,
    BoardCounts,
    CommentService,
    PostService,
    UserService,
    VoteService,
)
from board.domain.value import CommentId, PostId, SessionToken, UserId, VoteType

T = TypeVar("T")


class Store:
    """Session-holding facade over the board's domain services.

    Exactly one identity is active at a time. The session is forgotten when
    its token stops resolving, e.g. after a reset.
    """

    def __init__(
        self,
        auth_service: AuthService,
        user_service: UserService,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
        admin_service: AdminService,
        notifier: ChangeNotifier,
    ) -> None:
        self.auth_service = auth_service
        self.user_service = user_service
        self.post_service = post_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.admin_service = admin_service
        self.notifier = notifier
        self._session: Optional[Session] = None

    # Session

    @property
    def current_user(self) -> Optional[User]:
        """User behind the active session, or None."""
        if self._session is None:
            return None
        return self.auth_service.resolve(self._session.token)

    @property
    def token(self) -> Optional[SessionToken]:
        """Bearer token of the active session, or None."""
        if self.current_user is None:
            return None
        return self._session.token

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Register a zero-argument change listener.

        Returns:
            Handle that unsubscribes the listener
        """
        return self.notifier.subscribe(listener)

    # Auth

    def register(self, username: str, email: str, password: str) -> Result[User]:
        """Create an account and log it in."""
        return self._open(lambda: self.auth_service.register(username, email, password))

    def login(self, username: str, password: str) -> Result[User]:
        """Log in to an existing account."""
        return self._open(lambda: self.auth_service.login(username, password))

    def logout(self) -> Result[None]:
        """Drop the active session. Listeners are notified even if nobody was logged in."""
        token = self._session.token if self._session else None
        self._session = None
        self.auth_service.logout(token)
        return Result.ok()

    # Posts

    def create_post(self, title: str, content: str) -> Result[Post]:
        return self._run(
            lambda: self.post_service.create_post(self.current_user, title, content)
        )

    def delete_post(self, post_id: PostId) -> Result[None]:
        return self._run(
            lambda: self.post_service.delete_post(self.current_user, post_id)
        )

    def vote_post(self, post_id: PostId, vote_type: VoteType | str) -> Result[Post]:
        return self._run(
            lambda: self.vote_service.vote_post(self.current_user, post_id, vote_type)
        )

    # Comments

    def create_comment(
        self,
        post_id: PostId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Result[Comment]:
        return self._run(
            lambda: self.comment_service.create_comment(
                self.current_user, post_id, content, parent_id
            )
        )

    def delete_comment(self, comment_id: CommentId) -> Result[None]:
        return self._run(
            lambda: self.comment_service.delete_comment(self.current_user, comment_id)
        )

    def vote_comment(
        self, comment_id: CommentId, vote_type: VoteType | str
    ) -> Result[Comment]:
        return self._run(
            lambda: self.vote_service.vote_comment(
                self.current_user, comment_id, vote_type
            )
        )

    # Reads

    def get_user(self, user_id: UserId) -> Optional[User]:
        return self.user_service.get_user_by_id(user_id)

    def get_post(self, post_id: PostId) -> Optional[Post]:
        return self.post_service.get_post_by_id(post_id)

    def get_all_posts(self) -> list[Post]:
        return self.post_service.list_posts()

    def get_post_comments(self, post_id: PostId) -> list[Comment]:
        return self.comment_service.get_comments_for_post(post_id)

    def get_comment_thread(self, post_id: PostId) -> list[CommentNode]:
        return self.comment_service.build_thread(post_id)

    def get_comment_count(self, post_id: PostId) -> int:
        return self.post_service.count_comments(post_id)

    def get_user_posts(self, user_id: UserId) -> list[Post]:
        return self.post_service.list_posts_by_author(user_id)

    def get_user_comments(self, user_id: UserId) -> list[Comment]:
        return self.comment_service.get_comments_by_author(user_id)

    # Admin

    def reset(self) -> Result[BoardCounts]:
        """Restore the initial data set. Logs the current user out."""
        self._session = None
        return self._run(self.admin_service.reset)

    def _open(self, operation: Callable[[], Session]) -> Result[User]:
        # Hold notifications until the new session is in place so listeners
        # already see the new current user
        previous = self._session
        try:
            with self.notifier.deferred():
                session = operation()
                self._session = session
                # The store holds one identity; the replaced token stops working
                if previous is not None and previous.token != session.token:
                    self.auth_service.drop_session(previous.token)
        except DomainError as e:
            logfire.info("Store auth operation rejected", error=str(e))
            return Result.fail(e)
        return Result.ok(session.user)

    @staticmethod
    def _run(operation: Callable[[], T]) -> Result[T]:
        try:
            return Result.ok(operation())
        except DomainError as e:
            logfire.info("Store operation rejected", error=str(e))
            return Result.fail(e)
