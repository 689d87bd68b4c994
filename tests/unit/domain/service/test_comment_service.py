"""Unit tests for CommentService."""

from datetime import datetime, timedelta

import pytest

from board.domain.error import ForbiddenError, NotFoundError, UnauthorizedError, ValidationError
from board.domain.model import DELETED_AUTHOR, Comment
from board.domain.repository import CommentRepository
from board.domain.service import AuthService, CommentService, PostService
from board.domain.value import CommentId, PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.fixture
def alice(unit_env):
    return unit_env.get(AuthService).register("alice", "a@x.com", "secret1").user


@pytest.fixture
def bob(unit_env):
    return unit_env.get(AuthService).register("bob", "b@x.com", "secret1").user


@pytest.fixture
def post(unit_env, alice):
    return unit_env.get(PostService).create_post(
        alice, "Hello World", "This is a test post"
    )


class TestCreateComment:
    """Tests for create_comment."""

    def test_create_top_level_comment(self, unit_env, alice, post):
        comment_service = unit_env.get(CommentService)

        comment = comment_service.create_comment(alice, post.id, "Nice post")

        assert comment.id.startswith("comment-")
        assert comment.parent_id is None
        assert comment.upvotes == 0
        assert comment_service.get_comments_for_post(post.id) == [comment]

    def test_reply_to_missing_parent_is_accepted(self, unit_env, alice, post):
        comment_service = unit_env.get(CommentService)

        reply = comment_service.create_comment(
            alice, post.id, "Reply", parent_id=CommentId("comment-ghost")
        )

        assert reply.parent_id == "comment-ghost"

    def test_empty_parent_id_means_top_level(self, unit_env, alice, post):
        comment_service = unit_env.get(CommentService)

        comment = comment_service.create_comment(alice, post.id, "Nice", parent_id="")

        assert comment.parent_id is None

    def test_requires_session(self, unit_env, post):
        comment_service = unit_env.get(CommentService)

        with pytest.raises(UnauthorizedError, match="You must be logged in to comment"):
            comment_service.create_comment(None, post.id, "Nice post")

    def test_content_checked_before_post_exists(self, unit_env, alice):
        comment_service = unit_env.get(CommentService)

        with pytest.raises(ValidationError, match="Comment must be at least 2 characters"):
            comment_service.create_comment(alice, PostId("post-missing"), "x")

    def test_missing_post(self, unit_env, alice):
        comment_service = unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Post not found"):
            comment_service.create_comment(alice, PostId("post-missing"), "Nice post")


class TestDeleteComment:
    """Tests for delete_comment."""

    def test_delete_keeps_replies(self, unit_env, alice, post):
        comment_service = unit_env.get(CommentService)
        parent = comment_service.create_comment(alice, post.id, "Parent")
        reply = comment_service.create_comment(alice, post.id, "Reply", parent.id)

        comment_service.delete_comment(alice, parent.id)

        assert comment_service.get_comment_by_id(parent.id) is None
        assert comment_service.get_comment_by_id(reply.id) == reply

    def test_only_author_may_delete(self, unit_env, alice, bob, post):
        comment_service = unit_env.get(CommentService)
        comment = comment_service.create_comment(alice, post.id, "Mine")

        with pytest.raises(ForbiddenError, match="You can only delete your own comments"):
            comment_service.delete_comment(bob, comment.id)

    def test_missing_comment(self, unit_env, alice):
        comment_service = unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Comment not found"):
            comment_service.delete_comment(alice, CommentId("comment-missing"))

    def test_requires_session(self, unit_env):
        comment_service = unit_env.get(CommentService)

        with pytest.raises(UnauthorizedError, match="You must be logged in"):
            comment_service.delete_comment(None, CommentId("comment-missing"))


class TestBuildThread:
    """Tests for build_thread."""

    @staticmethod
    def seed(unit_env, post_id, author_id, rows):
        # rows: (id, parent_id, minutes ago)
        comment_repo = unit_env.get(CommentRepository)
        now = datetime.now()
        for comment_id, parent_id, minutes in rows:
            comment_repo.save(
                Comment(
                    id=CommentId(comment_id),
                    post_id=post_id,
                    author_id=author_id,
                    content=f"Comment {comment_id}",
                    parent_id=parent_id,
                    created_at=now - timedelta(minutes=minutes),
                )
            )

    def test_replies_nest_under_parents(self, unit_env, alice, post):
        self.seed(
            unit_env,
            post.id,
            alice.id,
            [
                ("comment-a", None, 30),
                ("comment-b", None, 20),
                ("comment-a1", "comment-a", 10),
                ("comment-a2", "comment-a", 5),
                ("comment-a1x", "comment-a1", 1),
            ],
        )

        thread = unit_env.get(CommentService).build_thread(post.id)

        assert [n.id for n in thread] == ["comment-b", "comment-a"]
        a = thread[1]
        assert [n.id for n in a.replies] == ["comment-a2", "comment-a1"]
        assert [n.id for n in a.replies[1].replies] == ["comment-a1x"]
        assert a.author_username == "alice"

    def test_orphans_hang_under_placeholder(self, unit_env, alice, post):
        self.seed(
            unit_env,
            post.id,
            alice.id,
            [
                ("comment-a", None, 30),
                ("comment-orphan1", "comment-gone", 20),
                ("comment-orphan2", "comment-gone", 10),
            ],
        )

        thread = unit_env.get(CommentService).build_thread(post.id)

        assert [n.id for n in thread] == ["comment-gone", "comment-a"]
        placeholder = thread[0]
        assert placeholder.is_placeholder
        assert placeholder.author_username == DELETED_AUTHOR
        assert [n.id for n in placeholder.replies] == [
            "comment-orphan2",
            "comment-orphan1",
        ]

    def test_unknown_author_shows_deleted(self, unit_env, post):
        self.seed(unit_env, post.id, UserId("user-gone"), [("comment-a", None, 1)])

        thread = unit_env.get(CommentService).build_thread(post.id)

        assert thread[0].author_username == DELETED_AUTHOR
        assert not thread[0].is_placeholder

    def test_empty_post_has_empty_thread(self, unit_env, post):
        assert unit_env.get(CommentService).build_thread(post.id) == []
