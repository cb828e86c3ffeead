"""
Authentication Use Cases

All authentication-related business logic.
"""

from .context import AuthContext
from .signup_use_case import SignupUseCase
from .signin_use_case import SigninUseCase
from .logout_use_case import LogoutUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .check_reset_token_use_case import CheckResetTokenUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    CredentialsCommand,
    TokenPair,
    PasswordResetTokenResponse,
    ResetTokenValidityResponse,
)

__all__ = [
    "AuthContext",
    # Use Cases
    "SignupUseCase",
    "SigninUseCase",
    "LogoutUseCase",
    "RefreshTokenUseCase",
    "ForgotPasswordUseCase",
    "CheckResetTokenUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "CredentialsCommand",
    # DTOs - Responses
    "TokenPair",
    "PasswordResetTokenResponse",
    "ResetTokenValidityResponse",
]
