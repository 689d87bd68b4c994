"""Demo data for a fresh board.

Seeded vote counters stand for votes from users that are not part of the
seed, so they have no matching ``voted_by`` entries.
"""

from datetime import datetime, timedelta

import logfire

from board.domain.model.comment import Comment
from board.domain.model.post import Post
from board.domain.model.user import User
from board.domain.service.admin_service import DataSeeder
from board.domain.value import AvatarColor, CommentId, PostId, UserId
from board.persistence.database import InMemoryDatabase

DEMO_USERS = [
    {
        "id": "user-1",
        "username": "demo_user",
        "email": "demo@example.com",
        "password": "password123",
        "avatar": "#4ECDC4",
        "age": timedelta(days=7),
    },
    {
        "id": "user-2",
        "username": "test_automation",
        "email": "test@example.com",
        "password": "test123",
        "avatar": "#FF6B6B",
        "age": timedelta(days=3),
    },
]

DEMO_POSTS = [
    {
        "id": "post-1",
        "title": "Welcome to MockReddit - A Testing Practice Site",
        "content": (
            "This is a mock Reddit clone designed for practicing automated testing. "
            "Feel free to create accounts, posts, and comments. "
            "All data resets on page reload!"
        ),
        "author_id": "user-1",
        "age": timedelta(days=2),
        "upvotes": 42,
        "downvotes": 3,
    },
    {
        "id": "post-2",
        "title": "Best practices for Selenium testing",
        "content": (
            "When writing Selenium tests, always use explicit waits instead of "
            "implicit waits. Use data-testid attributes for reliable element "
            "selection. Keep your tests independent and isolated."
        ),
        "author_id": "user-2",
        "age": timedelta(days=1),
        "upvotes": 28,
        "downvotes": 1,
    },
    {
        "id": "post-3",
        "title": "How do you handle dynamic content in your tests?",
        "content": (
            "I'm struggling with testing pages that have dynamic content loaded "
            "via AJAX. What strategies do you use? Polling? WebSocket monitoring? "
            "Would love to hear your approaches."
        ),
        "author_id": "user-1",
        "age": timedelta(hours=12),
        "upvotes": 15,
        "downvotes": 0,
    },
]

DEMO_COMMENTS = [
    {
        "id": "comment-1",
        "content": (
            "Great resource for learning automation testing! "
            "Thanks for setting this up."
        ),
        "author_id": "user-2",
        "post_id": "post-1",
        "age": timedelta(days=1),
        "upvotes": 5,
    },
    {
        "id": "comment-2",
        "content": "I always use data-testid, it makes selectors so much more reliable.",
        "author_id": "user-1",
        "post_id": "post-2",
        "age": timedelta(hours=6),
        "upvotes": 8,
    },
]


class DemoDataSeeder(DataSeeder):
    """Loads the demo users, posts and comments."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    def seed(self) -> None:
        now = datetime.now()

        for row in DEMO_USERS:
            self.database.users.save(
                User(
                    id=UserId(row["id"]),
                    username=row["username"],
                    email=row["email"],
                    password=row["password"],
                    avatar=AvatarColor(row["avatar"]),
                    created_at=now - row["age"],
                )
            )

        for row in DEMO_POSTS:
            self.database.posts.save(
                Post(
                    id=PostId(row["id"]),
                    title=row["title"],
                    content=row["content"],
                    author_id=UserId(row["author_id"]),
                    created_at=now - row["age"],
                    upvotes=row["upvotes"],
                    downvotes=row["downvotes"],
                )
            )

        for row in DEMO_COMMENTS:
            self.database.comments.save(
                Comment(
                    id=CommentId(row["id"]),
                    content=row["content"],
                    author_id=UserId(row["author_id"]),
                    post_id=PostId(row["post_id"]),
                    created_at=now - row["age"],
                    upvotes=row["upvotes"],
                )
            )

        logfire.info(
            "Demo data seeded",
            users=len(DEMO_USERS),
            posts=len(DEMO_POSTS),
            comments=len(DEMO_COMMENTS),
        )


class EmptySeeder(DataSeeder):
    """Leaves the board empty."""

    def seed(self) -> None:
        pass
