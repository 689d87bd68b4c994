"""Domain layer DI providers."""

from dishka import Scope, provide

from board.domain.event import ChangeNotifier
from board.domain.repository import (
    CommentRepository,
    PostRepository,
    SessionRepository,
    UserRepository,
)
from board.domain.service import (
    AdminService,
    AuthService,
    CommentService,
    DataSeeder,
    PostService,
    UserService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are APP-scoped: the repositories they wrap live for the
    whole process, and the in-process store shares them with the HTTP API.
    """

    scope = Scope.APP

    @provide
    def get_notifier(self) -> ChangeNotifier:
        """Provide the change notifier shared by every service."""
        return ChangeNotifier()

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        session_repository: SessionRepository,
        notifier: ChangeNotifier,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            user_repository=user_repository,
            session_repository=session_repository,
            notifier=notifier,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        notifier: ChangeNotifier,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            comment_repository=comment_repository,
            notifier=notifier,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_repository: UserRepository,
        notifier: ChangeNotifier,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            user_repository=user_repository,
            notifier=notifier,
        )

    @provide
    def get_vote_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        notifier: ChangeNotifier,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            post_repository=post_repository,
            comment_repository=comment_repository,
            notifier=notifier,
        )

    @provide
    def get_admin_service(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        session_repository: SessionRepository,
        seeder: DataSeeder,
        notifier: ChangeNotifier,
    ) -> AdminService:
        """Provide admin domain service."""
        return AdminService(
            user_repository=user_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            session_repository=session_repository,
            seeder=seeder,
            notifier=notifier,
        )
