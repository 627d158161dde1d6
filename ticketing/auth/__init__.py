from .service import (
    DEFAULT_USERS,
    AuthenticationError,
    AuthenticationService,
    InvalidCredentials,
    LoginAttemptsExceeded,
    User,
)

__all__ = [
    'DEFAULT_USERS',
    'AuthenticationError',
    'AuthenticationService',
    'InvalidCredentials',
    'LoginAttemptsExceeded',
    'User',
]
