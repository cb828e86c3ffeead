from abc import ABC, abstractmethod
from typing import Any, Dict
from uuid import UUID

from pydantic import BaseModel


class TokenPair(BaseModel):
    """Access and refresh tokens issued together"""

    access_token: str
    refresh_token: str


class ITokenIssuer(ABC):
    """Issues and verifies signed access/refresh tokens bound to a user"""

    @abstractmethod
    async def issue(self, user_id: UUID, email: str) -> TokenPair:
        """Create a new token pair for the user"""
        pass

    @abstractmethod
    def verify_access(self, token: str) -> Dict[str, Any]:
        """Decode an access token, raising InvalidTokenError if invalid or expired"""
        pass

    @abstractmethod
    def verify_refresh(self, token: str) -> Dict[str, Any]:
        """Decode a refresh token, raising InvalidTokenError if invalid or expired"""
        pass
