"""Authentication domain service."""

import random

import logfire

from board.domain.error import InvalidCredentialsError, ValidationError
from board.domain.event import ChangeNotifier
from board.domain.model.session import Session
from board.domain.model.user import User
from board.domain.repository import SessionRepository, UserRepository
from board.domain.value import AvatarColor, SessionToken, new_user_id

from .base import Service

AVATAR_COLORS = [
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#96CEB4",
    "#FFEAA7",
    "#DDA0DD",
    "#98D8C8",
    "#F7DC6F",
    "#BB8FCE",
    "#85C1E9",
]

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def pick_avatar_color(rng: random.Random | None = None) -> AvatarColor:
    """Pick a random avatar colour from the palette."""
    return AvatarColor((rng or random).choice(AVATAR_COLORS))


class AuthService(Service):
    """Domain service for registration, login and bearer sessions."""

    def __init__(
        self,
        user_repository: UserRepository,
        session_repository: SessionRepository,
        notifier: ChangeNotifier,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            session_repository: Token to user mapping
            notifier: Change notifier fired after each mutation
        """
        self.user_repository = user_repository
        self.session_repository = session_repository
        self.notifier = notifier

    def register(self, username: str, email: str, password: str) -> Session:
        """Create an account and open a session for it.

        Format rules are checked before uniqueness, username before email.

        Args:
            username: Desired username (unique, case-insensitive)
            email: Email address (unique, case-insensitive)
            password: Plain-text password

        Returns:
            Session for the new user

        Raises:
            ValidationError: For the first rule that fails
        """
        with logfire.span("auth_service.register", username=username):
            if not username or len(username) < MIN_USERNAME_LENGTH:
                raise ValidationError("Username must be at least 3 characters")
            if not email or "@" not in email:
                raise ValidationError("Please enter a valid email address")
            if not password or len(password) < MIN_PASSWORD_LENGTH:
                raise ValidationError("Password must be at least 6 characters")

            if self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username)
                raise ValidationError("Username already taken")
            if self.user_repository.find_by_email(email):
                logfire.warn("Email already registered", username=username)
                raise ValidationError("Email already registered")

            user = User(
                id=new_user_id(),
                username=username,
                email=email,
                password=password,
                avatar=pick_avatar_color(),
            )
            self.user_repository.save(user)
            session = self._open_session(user)

            logfire.info("User registered", user_id=user.id, username=username)
            self.notifier.notify()
            return session

    def login(self, username: str, password: str) -> Session:
        """Open a session for an existing account.

        Args:
            username: Username (matched case-insensitively)
            password: Password (matched exactly)

        Returns:
            New session for the user

        Raises:
            ValidationError: If either field is empty
            InvalidCredentialsError: If no account matches
        """
        with logfire.span("auth_service.login", username=username):
            if not username or not password:
                raise ValidationError("Please enter username and password")

            user = self.user_repository.find_by_username(username)
            if user is None or user.password != password:
                logfire.warn("Invalid login attempt", username=username)
                raise InvalidCredentialsError()

            session = self._open_session(user)
            logfire.info("User logged in", user_id=user.id)
            self.notifier.notify()
            return session

    def logout(self, token: SessionToken | str | None) -> None:
        """Forget a session token.

        Always notifies, whether or not the token was known.

        Args:
            token: Token to drop (None when nobody is logged in)
        """
        with logfire.span("auth_service.logout"):
            parsed = self._parse_token(token)
            if parsed is not None:
                removed = self.session_repository.delete(parsed)
                logfire.info("Session closed", removed=removed)
            self.notifier.notify()

    def drop_session(self, token: SessionToken) -> bool:
        """Forget a token without notifying.

        Used when a session is superseded as part of another operation that
        notifies on its own.

        Returns:
            True if the token was known
        """
        removed = self.session_repository.delete(token)
        logfire.info("Session superseded", removed=removed)
        return removed

    def resolve(self, token: SessionToken | str | None) -> User | None:
        """Find the user a bearer token belongs to.

        Args:
            token: Token presented by the client

        Returns:
            The user, or None if the token is missing, malformed or unknown
        """
        parsed = self._parse_token(token)
        if parsed is None:
            return None

        user_id = self.session_repository.find_user_id(parsed)
        if user_id is None:
            return None
        return self.user_repository.find_by_id(user_id)

    def _open_session(self, user: User) -> Session:
        token = SessionToken.issue(user.id)
        self.session_repository.save(token, user.id)
        return Session(token=token, user=user)

    @staticmethod
    def _parse_token(token: SessionToken | str | None) -> SessionToken | None:
        if token is None or isinstance(token, SessionToken):
            return token
        try:
            return SessionToken(token)
        except ValueError:
            return None
