from abc import ABC, abstractmethod


class ICredentialHasher(ABC):
    """
    One-way hashing for secrets (passwords and refresh tokens).

    Output is salted, so hashing the same secret twice yields different values.
    """

    @abstractmethod
    async def hash(self, secret: str) -> str:
        """Hash a secret"""
        pass

    @abstractmethod
    async def verify(self, hashed_secret: str, secret: str) -> bool:
        """True if secret matches hashed_secret, False on mismatch"""
        pass
