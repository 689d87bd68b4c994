"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.store import Store
from board.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    LogoutUseCase,
    RegisterUseCase,
)
from board.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetCommentThreadUseCase,
)
from board.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from board.application.usecase.system import HealthUseCase, ResetUseCase
from board.application.usecase.user import GetUserProfileUseCase
from board.application.usecase.vote import VoteCommentUseCase, VotePostUseCase
from board.config import APISettings
from board.domain.event import ChangeNotifier
from board.domain.service import (
    AdminService,
    AuthService,
    CommentService,
    PostService,
    UserService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # In-process store
    @provide(scope=Scope.APP)
    def get_store(
        self,
        auth_service: AuthService,
        user_service: UserService,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
        admin_service: AdminService,
        notifier: ChangeNotifier,
    ) -> Store:
        """Provide the in-process store (one current session per process)."""
        return Store(
            auth_service=auth_service,
            user_service=user_service,
            post_service=post_service,
            comment_service=comment_service,
            vote_service=vote_service,
            admin_service=admin_service,
            notifier=notifier,
        )

    # Auth use cases
    @provide
    def get_register_use_case(self, auth_service: AuthService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service)

    @provide
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service)

    @provide
    def get_logout_use_case(self, auth_service: AuthService) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(auth_service=auth_service)

    @provide
    def get_current_user_use_case(
        self, auth_service: AuthService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(auth_service=auth_service)

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, auth_service: AuthService, post_service: PostService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(auth_service=auth_service, post_service=post_service)

    @provide
    def get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(
        self, auth_service: AuthService, post_service: PostService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(auth_service=auth_service, post_service=post_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, auth_service: AuthService, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            auth_service=auth_service, comment_service=comment_service
        )

    @provide
    def get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_comment_thread_use_case(
        self, comment_service: CommentService
    ) -> GetCommentThreadUseCase:
        """Provide get comment thread use case."""
        return GetCommentThreadUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, auth_service: AuthService, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            auth_service=auth_service, comment_service=comment_service
        )

    # Vote use cases
    @provide
    def get_vote_post_use_case(
        self,
        auth_service: AuthService,
        vote_service: VoteService,
        post_service: PostService,
    ) -> VotePostUseCase:
        """Provide vote on post use case."""
        return VotePostUseCase(
            auth_service=auth_service,
            vote_service=vote_service,
            post_service=post_service,
        )

    @provide
    def get_vote_comment_use_case(
        self, auth_service: AuthService, vote_service: VoteService
    ) -> VoteCommentUseCase:
        """Provide vote on comment use case."""
        return VoteCommentUseCase(auth_service=auth_service, vote_service=vote_service)

    # User use cases
    @provide
    def get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    # System use cases
    @provide
    def get_health_use_case(
        self, admin_service: AdminService, api_settings: APISettings
    ) -> HealthUseCase:
        """Provide health check use case."""
        return HealthUseCase(admin_service=admin_service, version=api_settings.version)

    @provide
    def get_reset_use_case(self, admin_service: AdminService) -> ResetUseCase:
        """Provide reset use case."""
        return ResetUseCase(admin_service=admin_service)
