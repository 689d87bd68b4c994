"""Unit tests for VoteService."""

import pytest

from board.domain.error import NotFoundError, UnauthorizedError, ValidationError
from board.domain.event import ChangeNotifier
from board.domain.service import AuthService, CommentService, PostService, VoteService
from board.domain.value import CommentId, PostId, VoteType
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.fixture
def alice(unit_env):
    return unit_env.get(AuthService).register("alice", "a@x.com", "secret1").user


@pytest.fixture
def post(unit_env, alice):
    return unit_env.get(PostService).create_post(
        alice, "Hello World", "This is a test post"
    )


class TestVotePost:
    """Tests for vote_post."""

    def test_vote_toggle_sequence(self, unit_env, alice, post):
        vote_service = unit_env.get(VoteService)

        up = vote_service.vote_post(alice, post.id, "up")
        assert (up.upvotes, up.voted_by) == (1, {alice.id: VoteType.UP})

        undone = vote_service.vote_post(alice, post.id, VoteType.UP)
        assert (undone.upvotes, undone.voted_by) == (0, {})

        down = vote_service.vote_post(alice, post.id, "down")
        assert (down.upvotes, down.downvotes) == (0, 1)

        switched = vote_service.vote_post(alice, post.id, "up")
        assert (switched.upvotes, switched.downvotes) == (1, 0)

    def test_vote_is_persisted(self, unit_env, alice, post):
        unit_env.get(VoteService).vote_post(alice, post.id, "up")

        assert unit_env.get(PostService).get_post_by_id(post.id).upvotes == 1

    def test_requires_session(self, unit_env, post):
        with pytest.raises(UnauthorizedError, match="You must be logged in to vote"):
            unit_env.get(VoteService).vote_post(None, post.id, "up")

    def test_missing_post_checked_before_vote_type(self, unit_env, alice):
        with pytest.raises(NotFoundError, match="Post not found"):
            unit_env.get(VoteService).vote_post(alice, PostId("post-missing"), "sideways")

    def test_invalid_vote_type(self, unit_env, alice, post):
        calls = []
        unit_env.get(ChangeNotifier).subscribe(lambda: calls.append(1))

        with pytest.raises(ValidationError, match="Vote type must be 'up' or 'down'"):
            unit_env.get(VoteService).vote_post(alice, post.id, "sideways")

        assert calls == []


class TestVoteComment:
    """Tests for vote_comment."""

    def test_vote_comment_toggles(self, unit_env, alice, post):
        comment = unit_env.get(CommentService).create_comment(alice, post.id, "Nice")
        vote_service = unit_env.get(VoteService)

        down = vote_service.vote_comment(alice, comment.id, "down")
        again = vote_service.vote_comment(alice, comment.id, "down")

        assert down.downvotes == 1
        assert again.downvotes == 0
        assert again.voted_by == {}

    def test_missing_comment(self, unit_env, alice):
        with pytest.raises(NotFoundError, match="Comment not found"):
            unit_env.get(VoteService).vote_comment(
                alice, CommentId("comment-missing"), "up"
            )
