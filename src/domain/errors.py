"""
Auth Domain Errors

Use cases report expected failures as Err(Error(code, message)); the API
layer renders the Error as the response body. Codes used by the auth flows:

- WEAK_PASSWORD: password violates the password policy
- EMAIL_TAKEN: another user is registered with this email
- USER_NOT_FOUND: no user with this email or id
- INVALID_CREDENTIALS: wrong password, or refresh token not matching the
  stored hash (one code for both so callers cannot tell which check failed)
- COOLDOWN_ACTIVE: password reset requested too soon
- INVALID_TOKEN: unknown, expired or malformed token
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Error:
    """Machine-readable code plus human-readable message"""

    code: str
    message: str


class InvalidTokenError(Exception):
    """Raised by token verification when a JWT is malformed, forged or expired"""

    def __init__(self, message: str):
        self.error = Error("INVALID_TOKEN", message)
        super().__init__(message)
