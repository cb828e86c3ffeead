"""
Argon2 credential hasher.

Hashes passwords and refresh tokens with Argon2id. Hashing is CPU and
memory bound, so both operations run in a worker thread to keep the
event loop responsive.
"""

import asyncio
from typing import Optional

from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError

from src.app.services.credential_hasher import ICredentialHasher


class Argon2CredentialHasher(ICredentialHasher):
    """Argon2id implementation of ICredentialHasher"""

    def __init__(self, hasher: Optional[PasswordHasher] = None):
        self._hasher = hasher or PasswordHasher()

    async def hash(self, secret: str) -> str:
        return await asyncio.to_thread(self._hasher.hash, secret)

    async def verify(self, hashed_secret: str, secret: str) -> bool:
        return await asyncio.to_thread(self._verify, hashed_secret, secret)

    def _verify(self, hashed_secret: str, secret: str) -> bool:
        try:
            return self._hasher.verify(hashed_secret, secret)
        except VerifyMismatchError:
            return False
