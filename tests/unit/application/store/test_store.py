"""Unit tests for the in-process Store."""

import pytest

from board.application.result import ErrorType
from board.application.store import Store
from board.domain.service import AdminService, AuthService
from board.domain.value import CommentId, PostId, VoteType
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

seeded_env = create_env_fixture(unmock={"persistence"})


@pytest.fixture
def store(unit_env) -> Store:
    return unit_env.get(Store)


class TestScenario:
    def test_register_post_vote_logout(self, store):
        registered = store.register("alice", "a@x.com", "secret1")
        assert registered.success
        assert store.current_user == registered.value
        assert store.token.root.startswith(f"token-{registered.value.id}-")

        created = store.create_post("Hello World", "This is a test post")
        assert created.success
        post_id = created.value.id
        assert created.value.upvotes == 0

        up = store.vote_post(post_id, "up")
        assert up.value.upvotes == 1
        assert up.value.voted_by == {registered.value.id: VoteType.UP}

        again = store.vote_post(post_id, "up")
        assert again.value.upvotes == 0
        assert again.value.voted_by == {}

        down = store.vote_post(post_id, "down")
        assert down.value.downvotes == 1

        assert store.logout().success
        assert store.current_user is None
        assert store.token is None

        rejected = store.create_post("Another post", "Some more content")
        assert not rejected.success
        assert rejected.error_type == ErrorType.UNAUTHORIZED
        assert rejected.error == "You must be logged in to create a post"


class TestResults:
    def test_validation_failure(self, store):
        result = store.register("al", "a@x.com", "secret1")

        assert not result.success
        assert result.value is None
        assert result.error == "Username must be at least 3 characters"
        assert result.error_type == ErrorType.VALIDATION

    def test_invalid_credentials(self, store):
        result = store.login("nobody", "secret1")

        assert result.error_type == ErrorType.INVALID_CREDENTIALS
        assert store.current_user is None

    def test_not_found_and_forbidden(self, store):
        store.register("alice", "a@x.com", "secret1")
        post = store.create_post("Hello World", "This is a test post").value
        store.logout()
        store.register("bob", "b@x.com", "secret1")

        assert store.delete_post(PostId("post-missing")).error_type == ErrorType.NOT_FOUND
        forbidden = store.delete_post(post.id)
        assert forbidden.error_type == ErrorType.FORBIDDEN
        assert forbidden.error == "You can only delete your own posts"

    def test_comment_flow(self, store):
        store.register("alice", "a@x.com", "secret1")
        post = store.create_post("Hello World", "This is a test post").value

        parent = store.create_comment(post.id, "First!").value
        reply = store.create_comment(post.id, "Reply", parent.id).value
        vote = store.vote_comment(reply.id, "down")

        assert vote.value.downvotes == 1
        assert store.get_comment_count(post.id) == 2
        assert [c.id for c in store.get_post_comments(post.id)] == [reply.id, parent.id]
        assert store.get_comment_thread(post.id)[0].replies[0].id == reply.id

        assert store.delete_comment(parent.id).success
        assert store.get_comment_thread(post.id)[0].is_placeholder
        assert store.delete_comment(CommentId("comment-missing")).error == "Comment not found"

    def test_reads_need_no_session(self, store):
        assert store.get_all_posts() == []
        assert store.get_post(PostId("post-missing")) is None
        assert store.get_user("user-missing") is None


class TestListeners:
    def test_listener_sees_new_user_on_register(self, store):
        seen = []
        store.subscribe(lambda: seen.append(store.current_user))

        result = store.register("alice", "a@x.com", "secret1")

        assert seen == [result.value]

    def test_listener_called_once_per_mutation(self, store):
        calls = []
        store.subscribe(lambda: calls.append(1))

        store.register("alice", "a@x.com", "secret1")
        post = store.create_post("Hello World", "This is a test post").value
        store.vote_post(post.id, "up")
        store.create_post("x", "y")  # rejected
        store.logout()
        store.logout()  # nobody logged in, still notifies

        assert len(calls) == 5

    def test_unsubscribe(self, store):
        calls = []
        unsubscribe = store.subscribe(lambda: calls.append(1))

        unsubscribe()
        store.register("alice", "a@x.com", "secret1")

        assert calls == []

    def test_http_mutations_reach_store_listeners(self, unit_env, store):
        calls = []
        store.subscribe(lambda: calls.append(1))

        unit_env.get(AuthService).register("bob", "b@x.com", "secret1")

        assert calls == [1]


class TestSessionLifecycle:
    def test_reset_logs_out_and_restores_seed(self, seeded_env):
        store = seeded_env.get(Store)
        assert store.login("DEMO_USER", "password123").success
        assert store.delete_post(PostId("post-1")).success

        result = store.reset()

        assert result.success
        assert result.value.posts == 3
        assert store.current_user is None
        assert store.get_post(PostId("post-1")) is not None

    def test_session_dropped_elsewhere_goes_stale(self, unit_env, store):
        store.register("alice", "a@x.com", "secret1")

        unit_env.get(AuthService).logout(store.token)

        assert store.current_user is None
        assert store.create_post("Hello World", "This is a test post").error_type == (
            ErrorType.UNAUTHORIZED
        )

    def test_second_register_replaces_session(self, unit_env, store):
        first = store.register("alice", "a@x.com", "secret1")
        old_token = store.token

        second = store.register("bob", "b@x.com", "secret1")

        assert unit_env.get(AdminService).counts().sessions == 1
        assert unit_env.get(AuthService).resolve(old_token) is None
        assert store.current_user == second.value
        assert second.value.id != first.value.id

    def test_login_over_session_replaces_it(self, unit_env, store):
        store.register("alice", "a@x.com", "secret1")
        store.logout()
        store.register("bob", "b@x.com", "secret1")
        bob_token = store.token

        assert store.login("alice", "secret1").success

        assert unit_env.get(AdminService).counts().sessions == 1
        assert unit_env.get(AuthService).resolve(bob_token) is None
        assert store.current_user.username == "alice"

    def test_failed_login_keeps_session(self, unit_env, store):
        store.register("alice", "a@x.com", "secret1")
        token = store.token

        assert not store.login("alice", "wrong-password").success

        assert store.token == token
        assert unit_env.get(AdminService).counts().sessions == 1
