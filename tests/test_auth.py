"""Unit tests for the authentication service."""

import pytest

from ticketing.auth import (
    AuthenticationService,
    InvalidCredentials,
    LoginAttemptsExceeded,
    User,
)


@pytest.fixture
def auth():
    return AuthenticationService()


class TestLogin:
    """Tests for login, logout and the attempt counter."""

    def test_admin_login(self, auth):
        user = auth.login("admin", "admin123")
        assert user.username == "admin"
        assert auth.current_user == user
        assert auth.is_admin is True

    def test_regular_user_is_not_admin(self, auth):
        auth.login("user1", "pass1")
        assert auth.is_admin is False
        assert auth.current_user.role == "USER"

    def test_credentials_are_trimmed(self, auth):
        assert auth.login("  guest ", " guest ").username == "guest"

    def test_wrong_password_counts_attempt(self, auth):
        with pytest.raises(InvalidCredentials) as exc:
            auth.login("admin", "nope")
        assert exc.value.attempts_left == 2
        assert auth.failed_attempts == 1
        assert auth.current_user is None

    def test_lockout_after_max_attempts(self, auth):
        for _ in range(3):
            with pytest.raises(InvalidCredentials):
                auth.login("admin", "wrong")

        with pytest.raises(LoginAttemptsExceeded):
            auth.login("admin", "admin123")
        assert auth.current_user is None

    def test_success_resets_counter(self, auth):
        with pytest.raises(InvalidCredentials):
            auth.login("admin", "wrong")
        auth.login("admin", "admin123")
        assert auth.failed_attempts == 0

    def test_already_logged_in_returns_current_user(self, auth):
        first = auth.login("manager", "manage456")
        assert auth.login("user1", "pass1") is first

    def test_logout(self, auth):
        auth.login("roxana", "rox789")
        user = auth.logout()
        assert user.username == "roxana"
        assert auth.current_user is None
        assert auth.is_admin is False

    def test_logout_without_user(self, auth):
        assert auth.logout() is None

    def test_logout_resets_counter(self, auth):
        with pytest.raises(InvalidCredentials):
            auth.login("admin", "wrong")
        auth.logout()
        assert auth.failed_attempts == 0

    def test_reset_login_attempts_lifts_lockout(self, auth):
        for _ in range(3):
            with pytest.raises(InvalidCredentials):
                auth.login("admin", "wrong")
        auth.reset_login_attempts()
        assert auth.login("admin", "admin123").is_admin is True

    def test_custom_users_and_limit(self):
        auth = AuthenticationService(users=[User("ops", "secret", True)], max_attempts=1)
        with pytest.raises(InvalidCredentials) as exc:
            auth.login("admin", "admin123")
        assert exc.value.attempts_left == 0
        with pytest.raises(LoginAttemptsExceeded):
            auth.login("ops", "secret")
