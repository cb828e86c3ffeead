"""
User Use Cases

Profile of the authenticated user.
"""

from .get_profile_use_case import GetProfileUseCase
from .edit_user_use_case import EditUserUseCase
from .dtos import EditUserCommand, UserProfileResponse

__all__ = [
    "GetProfileUseCase",
    "EditUserUseCase",
    "EditUserCommand",
    "UserProfileResponse",
]
