"""Unit tests for AuthService."""

import random
from datetime import datetime

import pytest

from board.domain.error import InvalidCredentialsError, ValidationError
from board.domain.event import ChangeNotifier
from board.domain.repository import SessionRepository, UserRepository
from board.domain.service import AVATAR_COLORS, AuthService
from board.domain.service.auth_service import pick_avatar_color
from board.domain.value import SessionToken
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def register_alice(auth_service: AuthService):
    return auth_service.register("alice", "a@x.com", "secret1")


class TestRegister:
    """Tests for register."""

    def test_register_creates_user_and_session(self, unit_env):
        auth_service = unit_env.get(AuthService)
        session_repo = unit_env.get(SessionRepository)

        session = register_alice(auth_service)

        assert session.user.username == "alice"
        assert session.user.id.startswith("user-")
        assert session.user.avatar.root in AVATAR_COLORS
        assert session.token.root.startswith(f"token-{session.user.id}-")
        assert session_repo.find_user_id(session.token) == session.user.id

    def test_register_notifies_once(self, unit_env):
        auth_service = unit_env.get(AuthService)
        notifier = unit_env.get(ChangeNotifier)
        calls = []
        notifier.subscribe(lambda: calls.append(1))

        register_alice(auth_service)

        assert calls == [1]

    @pytest.mark.parametrize(
        ("username", "email", "password", "message"),
        [
            ("al", "bad", "1", "Username must be at least 3 characters"),
            ("", "a@x.com", "secret1", "Username must be at least 3 characters"),
            ("alice", "bad", "1", "Please enter a valid email address"),
            ("alice", "a@x.com", "12345", "Password must be at least 6 characters"),
        ],
    )
    def test_first_failing_rule_wins(self, unit_env, username, email, password, message):
        auth_service = unit_env.get(AuthService)

        with pytest.raises(ValidationError, match=message):
            auth_service.register(username, email, password)

    def test_username_taken_is_case_insensitive(self, unit_env):
        auth_service = unit_env.get(AuthService)
        register_alice(auth_service)

        with pytest.raises(ValidationError, match="Username already taken"):
            auth_service.register("ALICE", "other@x.com", "secret1")

    def test_email_taken_is_case_insensitive(self, unit_env):
        auth_service = unit_env.get(AuthService)
        register_alice(auth_service)

        with pytest.raises(ValidationError, match="Email already registered"):
            auth_service.register("bob", "A@X.COM", "secret1")

    def test_username_checked_before_email(self, unit_env):
        auth_service = unit_env.get(AuthService)
        register_alice(auth_service)

        with pytest.raises(ValidationError, match="Username already taken"):
            auth_service.register("Alice", "a@x.com", "secret1")

    def test_failed_register_stores_nothing_and_does_not_notify(self, unit_env):
        auth_service = unit_env.get(AuthService)
        user_repo = unit_env.get(UserRepository)
        notifier = unit_env.get(ChangeNotifier)
        calls = []
        notifier.subscribe(lambda: calls.append(1))

        with pytest.raises(ValidationError):
            auth_service.register("alice", "a@x.com", "short")

        assert user_repo.count() == 0
        assert calls == []


class TestLogin:
    """Tests for login."""

    def test_login_is_case_insensitive_on_username(self, unit_env):
        auth_service = unit_env.get(AuthService)
        registered = register_alice(auth_service)

        session = auth_service.login("ALICE", "secret1")

        assert session.user.id == registered.user.id

    def test_login_requires_both_fields(self, unit_env):
        auth_service = unit_env.get(AuthService)

        with pytest.raises(ValidationError, match="Please enter username and password"):
            auth_service.login("alice", "")

    def test_wrong_password_is_rejected(self, unit_env):
        auth_service = unit_env.get(AuthService)
        register_alice(auth_service)

        with pytest.raises(InvalidCredentialsError, match="Invalid username or password"):
            auth_service.login("alice", "Secret1")

    def test_unknown_user_is_rejected(self, unit_env):
        auth_service = unit_env.get(AuthService)

        with pytest.raises(InvalidCredentialsError):
            auth_service.login("nobody", "secret1")


class TestSessions:
    """Tests for resolve and logout."""

    def test_resolve_returns_token_owner(self, unit_env):
        auth_service = unit_env.get(AuthService)
        session = register_alice(auth_service)

        assert auth_service.resolve(session.token.root) == session.user

    @pytest.mark.parametrize("token", [None, "", "garbage", "token-user-x-1"])
    def test_resolve_unknown_or_malformed_token_returns_none(self, unit_env, token):
        auth_service = unit_env.get(AuthService)

        assert auth_service.resolve(token) is None

    def test_logout_drops_token_and_notifies(self, unit_env):
        auth_service = unit_env.get(AuthService)
        notifier = unit_env.get(ChangeNotifier)
        session = register_alice(auth_service)
        calls = []
        notifier.subscribe(lambda: calls.append(1))

        auth_service.logout(session.token)

        assert auth_service.resolve(session.token) is None
        assert calls == [1]

    def test_logout_without_token_still_notifies(self, unit_env):
        auth_service = unit_env.get(AuthService)
        notifier = unit_env.get(ChangeNotifier)
        calls = []
        notifier.subscribe(lambda: calls.append(1))

        auth_service.logout(None)

        assert calls == [1]

    def test_issued_token_format(self):
        token = SessionToken.issue("user-1", datetime.fromtimestamp(1700000000))

        assert token.root == "token-user-1-1700000000000"

    def test_tokens_issued_in_same_millisecond_collide(self):
        issued_at = datetime.fromtimestamp(1700000000.123)

        assert SessionToken.issue("user-1", issued_at) == SessionToken.issue("user-1", issued_at)
        assert SessionToken.issue("user-2", issued_at) != SessionToken.issue("user-1", issued_at)

    def test_drop_session_forgets_token_without_notifying(self, unit_env):
        auth_service = unit_env.get(AuthService)
        notifier = unit_env.get(ChangeNotifier)
        session = register_alice(auth_service)
        calls = []
        notifier.subscribe(lambda: calls.append(1))

        assert auth_service.drop_session(session.token)
        assert not auth_service.drop_session(session.token)

        assert auth_service.resolve(session.token) is None
        assert calls == []


class TestAvatar:
    """Tests for avatar colour selection."""

    def test_seeded_rng_picks_reproducibly(self):
        color = pick_avatar_color(random.Random(7))

        assert color == pick_avatar_color(random.Random(7))
        assert color.root in AVATAR_COLORS
