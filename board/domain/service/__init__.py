"""Domain services."""

from .admin_service import AdminService, BoardCounts, DataSeeder
from .auth_service import AVATAR_COLORS, AuthService
from .base import Service
from .comment_service import CommentService
from .post_service import PostService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AVATAR_COLORS",
    "AdminService",
    "AuthService",
    "BoardCounts",
    "CommentService",
    "DataSeeder",
    "PostService",
    "Service",
    "UserService",
    "VoteService",
]
