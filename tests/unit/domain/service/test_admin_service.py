"""Unit tests for AdminService."""

from board.domain.event import ChangeNotifier
from board.domain.service import AdminService, AuthService, PostService
from board.domain.value import PostId
from tests.harness import create_env_fixture

# Empty board
unit_env = create_env_fixture()

# Board seeded with demo data, as in production
seeded_env = create_env_fixture(unmock={"persistence"})


class TestCounts:
    def test_empty_board(self, unit_env):
        counts = unit_env.get(AdminService).counts()

        assert (counts.users, counts.posts, counts.comments, counts.sessions) == (0, 0, 0, 0)

    def test_seeded_board(self, seeded_env):
        counts = seeded_env.get(AdminService).counts()

        assert (counts.users, counts.posts, counts.comments, counts.sessions) == (2, 3, 2, 0)


class TestReset:
    def test_reset_restores_seed_and_drops_sessions(self, seeded_env):
        auth_service = seeded_env.get(AuthService)
        post_service = seeded_env.get(PostService)
        session = auth_service.register("alice", "a@x.com", "secret1")
        post_service.create_post(session.user, "Hello World", "This is a test post")
        demo = auth_service.login("demo_user", "password123").user
        post_service.delete_post(demo, PostId("post-1"))

        counts = seeded_env.get(AdminService).reset()

        assert (counts.users, counts.posts, counts.comments, counts.sessions) == (2, 3, 2, 0)
        assert post_service.get_post_by_id(PostId("post-1")).upvotes == 42
        assert auth_service.resolve(session.token) is None

    def test_reset_notifies(self, unit_env):
        calls = []
        unit_env.get(ChangeNotifier).subscribe(lambda: calls.append(1))

        unit_env.get(AdminService).reset()

        assert calls == [1]
