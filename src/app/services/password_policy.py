"""
Password Policy

Stateless password strength rules shared by signup and password reset.
"""

import re
from dataclasses import dataclass
from typing import Optional

from src.domain.errors import Error

SPECIAL_CHARACTERS = "!@#$%^&*()_+[]{};':\"\\|,.<>/?"

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_SPECIAL = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")


@dataclass(frozen=True)
class PasswordPolicy:
    """
    Password complexity rules.

    Rules are checked in a fixed order (length, uppercase, lowercase,
    special character) and validation stops at the first violation.
    """

    min_length: int = 8
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_special_char: bool = True

    def validate(self, password: str) -> Optional[Error]:
        """
        Validate password against the policy.

        Args:
            password: Plain text password

        Returns:
            None if the password is strong enough, otherwise a WEAK_PASSWORD
            Error describing the first rule it violates
        """
        if len(password) < self.min_length:
            return _weak(f"The password must have at least {self.min_length} characters.")

        if self.require_uppercase and not _UPPERCASE.search(password):
            return _weak("The password must contain at least one uppercase letter.")

        if self.require_lowercase and not _LOWERCASE.search(password):
            return _weak("The password must contain at least one lowercase letter.")

        if self.require_special_char and not _SPECIAL.search(password):
            return _weak("The password must contain at least one special character.")

        return None


def _weak(message: str) -> Error:
    return Error("WEAK_PASSWORD", message)
