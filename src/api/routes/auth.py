from typing import Any, Dict

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthContext,
    CheckResetTokenUseCase,
    CredentialsCommand,
    ForgotPasswordUseCase,
    LogoutUseCase,
    PasswordResetTokenResponse,
    RefreshTokenUseCase,
    ResetPasswordUseCase,
    ResetTokenValidityResponse,
    SigninUseCase,
    SignupUseCase,
    TokenPair,
)
from src.depends import (
    get_auth_context,
    get_current_user,
    get_refresh_credentials,
    get_unit_of_work,
    user_id_from,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class CredentialsRequest(BaseModel):
    """
    Signup/signin HTTP request payload

    Validates incoming HTTP request before converting to CredentialsCommand.
    Password strength is checked by the use case, not here.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=TokenPair)
async def signup(
    request: CredentialsRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth: AuthContext = Depends(get_auth_context),
):
    """
    User Signup

    Creates a new account and returns access and refresh tokens.

    Raises:
        - 400 Bad Request: Malformed input or weak password
        - 409 Conflict: Email already registered
    """
    command = CredentialsCommand(email=request.email, password=request.password)

    use_case = SignupUseCase(uow, auth)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.err_value
        if error.code == "WEAK_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "EMAIL_TAKEN":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.ok_value


@router.post("/signin", status_code=status.HTTP_200_OK, response_model=TokenPair)
async def signin(
    request: CredentialsRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth: AuthContext = Depends(get_auth_context),
):
    """
    User Signin

    Raises:
        - 400 Bad Request: Malformed input
        - 403 Forbidden: Wrong password
        - 404 Not Found: Unknown email
    """
    command = CredentialsCommand(email=request.email, password=request.password)

    use_case = SigninUseCase(uow, auth)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.err_value
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.ok_value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=bool)
async def logout(
    current_user: Dict[str, Any] = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Logout

    Invalidates the refresh token of the user owning the access token.
    Idempotent.

    Raises:
        - 401 Unauthorized: Invalid or expired access token
    """
    result = await LogoutUseCase(uow).execute(user_id_from(current_user))

    if result.is_err():
        raise ServerError(result.err_value)

    return result.ok_value


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=TokenPair)
async def refresh(
    credentials: Dict[str, Any] = Depends(get_refresh_credentials),
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth: AuthContext = Depends(get_auth_context),
):
    """
    Refresh Tokens

    Takes the refresh token as bearer token and rotates it.

    Raises:
        - 403 Forbidden: Invalid, expired, rotated or logged out refresh token
    """
    use_case = RefreshTokenUseCase(uow, auth)

    result = await use_case.execute(user_id_from(credentials), credentials["refresh_token"])

    if result.is_err():
        error = result.err_value
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.ok_value


class ForgotPasswordRequest(BaseModel):
    """Forgot password HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")


@router.post(
    "/forgot",
    status_code=status.HTTP_201_CREATED,
    response_model=PasswordResetTokenResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth: AuthContext = Depends(get_auth_context),
):
    """
    Forgot Password

    Generates a reset token and emails the reset link.

    Raises:
        - 400 Bad Request: Cooldown active
        - 404 Not Found: Unknown email
    """
    use_case = ForgotPasswordUseCase(uow, auth)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.err_value
        if error.code == "COOLDOWN_ACTIVE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.ok_value


@router.get(
    "/reset",
    status_code=status.HTTP_200_OK,
    response_model=ResetTokenValidityResponse,
    response_model_exclude_none=True,
)
async def check_reset_token(
    reset_token: str = Query(..., alias="resetToken"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth: AuthContext = Depends(get_auth_context),
):
    """
    Check Reset Token

    Returns isExpired, plus the account email while the token is valid.

    Raises:
        - 400 Bad Request: Unknown token
    """
    use_case = CheckResetTokenUseCase(uow, auth)
    result = await use_case.execute(reset_token)

    if result.is_err():
        error = result.err_value
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.ok_value


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    password: str = Field(..., min_length=1, description="New password")


@router.put("/reset", status_code=status.HTTP_200_OK, response_model=None)
async def reset_password(
    request: ResetPasswordRequest,
    reset_token: str = Query(..., alias="resetToken"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth: AuthContext = Depends(get_auth_context),
):
    """
    Reset Password

    Raises:
        - 400 Bad Request: Weak password, unknown or expired token
    """
    use_case = ResetPasswordUseCase(uow, auth)
    result = await use_case.execute(request.password, reset_token)

    if result.is_err():
        error = result.err_value
        if error.code in ("WEAK_PASSWORD", "INVALID_TOKEN"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.ok_value
