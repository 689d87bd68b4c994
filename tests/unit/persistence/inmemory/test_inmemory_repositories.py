"""Unit tests for the in-memory repositories."""

from datetime import datetime

from board.domain.model import Comment, Post, User
from board.domain.value import AvatarColor, CommentId, PostId, SessionToken, UserId
from board.persistence.repository import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemorySessionRepository,
    InMemoryUserRepository,
)


def make_post(post_id: str, created_at: datetime) -> Post:
    return Post(
        id=PostId(post_id),
        title="Some title",
        content="Some content",
        author_id=UserId("user-1"),
        created_at=created_at,
    )


class TestInMemoryUserRepository:
    def test_lookup_by_username_and_email_ignores_case(self):
        repo = InMemoryUserRepository()
        user = repo.save(
            User(
                id=UserId("user-1"),
                username="Alice",
                email="Alice@X.com",
                password="secret1",
                avatar=AvatarColor("#FF6B6B"),
            )
        )

        assert repo.find_by_username("aLiCe") == user
        assert repo.find_by_email("alice@x.com") == user
        assert repo.find_by_username("bob") is None


class TestInMemoryPostRepository:
    def test_same_timestamp_lists_latest_insert_first(self):
        repo = InMemoryPostRepository()
        stamp = datetime(2024, 1, 1, 12, 0, 0)
        repo.save(make_post("post-a", stamp))
        repo.save(make_post("post-b", stamp))

        assert [p.id for p in repo.find_all()] == ["post-b", "post-a"]

    def test_save_replaces_existing(self):
        repo = InMemoryPostRepository()
        post = repo.save(make_post("post-a", datetime(2024, 1, 1)))

        repo.save(post.model_copy(update={"upvotes": 5}))

        assert repo.count() == 1
        assert repo.find_by_id(PostId("post-a")).upvotes == 5


class TestInMemoryCommentRepository:
    def test_delete_by_post_only_removes_that_post(self):
        repo = InMemoryCommentRepository()
        for i, post_id in enumerate(["post-a", "post-a", "post-b"]):
            repo.save(
                Comment(
                    id=CommentId(f"comment-{i}"),
                    post_id=PostId(post_id),
                    author_id=UserId("user-1"),
                    content="Nice",
                )
            )

        removed = repo.delete_by_post(PostId("post-a"))

        assert removed == 2
        assert repo.count() == 1
        assert repo.count_by_post(PostId("post-b")) == 1


class TestInMemorySessionRepository:
    def test_save_find_delete(self):
        repo = InMemorySessionRepository()
        token = SessionToken("token-user-1-1700000000000")

        repo.save(token, UserId("user-1"))

        assert repo.find_user_id(SessionToken(token.root)) == "user-1"
        assert repo.delete(token) is True
        assert repo.delete(token) is False
        assert repo.count() == 0
