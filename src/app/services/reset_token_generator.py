"""
Reset Token Generator

Produces opaque password reset tokens and their expiry timestamps.
"""

import random
import secrets
import string
from datetime import datetime, timedelta
from typing import NamedTuple, Optional

from src.domain.base import Clock, utc_now

RESET_TOKEN_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase
RESET_TOKEN_LENGTH = 32


class ResetToken(NamedTuple):
    reset_token: str
    reset_token_expires_at: datetime


class ResetTokenGenerator:
    """
    Generates 32-character alphanumeric reset tokens.

    Characters are sampled uniformly with replacement. Collisions with
    existing tokens are not checked (62**32 possible values).

    Args:
        timeout: How long a generated token stays valid
        rng: Random source (defaults to the OS CSPRNG)
        clock: Returns the current naive UTC time
    """

    def __init__(
        self,
        timeout: timedelta = timedelta(minutes=10),
        rng: Optional[random.Random] = None,
        clock: Clock = utc_now,
    ):
        self.timeout = timeout
        self.rng = rng or secrets.SystemRandom()
        self.clock = clock

    def generate(self) -> ResetToken:
        token = "".join(
            self.rng.choice(RESET_TOKEN_ALPHABET) for _ in range(RESET_TOKEN_LENGTH)
        )
        return ResetToken(
            reset_token=token,
            reset_token_expires_at=self.clock() + self.timeout,
        )
