"""
Authentication Service

Fixed demo user list with login/logout, a failed-attempt counter and an
admin check. Credentials are plain demo values; there is no hashing or
session handling.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ticketing.exceptions import TicketingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class User:
    username: str
    password: str
    is_admin: bool = False

    @property
    def role(self) -> str:
        return "ADMIN" if self.is_admin else "USER"


DEFAULT_USERS: List[User] = [
    User("admin", "admin123", True),
    User("manager", "manage456", True),
    User("roxana", "rox789", True),
    User("user1", "pass1", False),
    User("user2", "pass2", False),
    User("guest", "guest", False),
]


class AuthenticationError(TicketingError):
    """Base class for login failures."""


class InvalidCredentials(AuthenticationError):
    """Raised when the username/password pair is unknown."""

    def __init__(self, attempts_left: int):
        self.attempts_left = attempts_left
        super().__init__(
            f"Incorrect username or password. Attempts left: {attempts_left}"
        )


class LoginAttemptsExceeded(AuthenticationError):
    """Raised once the failed-attempt limit has been reached."""

    def __init__(self, max_attempts: int):
        self.max_attempts = max_attempts
        super().__init__(f"Maximum login attempts reached ({max_attempts}).")


class AuthenticationService:
    """Tracks the logged-in user of the session."""

    def __init__(self, users: Optional[List[User]] = None, max_attempts: int = 3):
        self.users = list(users) if users is not None else list(DEFAULT_USERS)
        self.max_attempts = max_attempts
        self.failed_attempts = 0
        self._current_user: Optional[User] = None

    @property
    def current_user(self) -> Optional[User]:
        return self._current_user

    @property
    def is_admin(self) -> bool:
        return self._current_user is not None and self._current_user.is_admin

    @property
    def attempts_left(self) -> int:
        return max(0, self.max_attempts - self.failed_attempts)

    def login(self, username: str, password: str) -> User:
        """
        Log a user in.

        Returns the current user unchanged if someone is already logged in.

        Raises:
            LoginAttemptsExceeded: The failed-attempt limit was reached earlier
            InvalidCredentials: Unknown username/password pair
        """
        if self._current_user is not None:
            logger.info(f"Already logged in as {self._current_user.username}")
            return self._current_user

        if self.failed_attempts >= self.max_attempts:
            logger.warning("Login refused: maximum attempts reached")
            raise LoginAttemptsExceeded(self.max_attempts)

        username = (username or "").strip()
        password = (password or "").strip()
        user = next(
            (u for u in self.users if u.username == username and u.password == password),
            None,
        )

        if user is None:
            self.failed_attempts += 1
            logger.warning(
                f"Failed login for {username!r} ({self.attempts_left} attempts left)"
            )
            raise InvalidCredentials(self.attempts_left)

        self._current_user = user
        self.failed_attempts = 0
        logger.info(f"User {user.username} logged in as {user.role}")
        return user

    def logout(self) -> Optional[User]:
        """Log the current user out and return them (None if nobody was logged in)."""
        user = self._current_user
        if user is not None:
            logger.info(f"User {user.username} logged out")
        self._current_user = None
        self.failed_attempts = 0
        return user

    def reset_login_attempts(self) -> None:
        self.failed_attempts = 0
