from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    EditUserCommand,
    EditUserUseCase,
    GetProfileUseCase,
    UserProfileResponse,
)
from src.depends import get_current_user, get_unit_of_work, user_id_from

router = APIRouter(prefix="/users", tags=["User"])


class EditUserRequest(BaseModel):
    """PATCH /users request payload"""

    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserProfileResponse)
async def get_me(
    current_user: Dict[str, Any] = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User

    Raises:
        - 401 Unauthorized: Invalid or expired access token
        - 404 Not Found: User no longer exists
    """
    result = await GetProfileUseCase(uow).execute(user_id_from(current_user))

    if result.is_err():
        error = result.err_value
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.ok_value


@router.patch("", status_code=status.HTTP_200_OK, response_model=UserProfileResponse)
async def edit_user(
    request: EditUserRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Edit Current User

    Raises:
        - 401 Unauthorized: Invalid or expired access token
        - 404 Not Found: User no longer exists
    """
    command = EditUserCommand(first_name=request.first_name, last_name=request.last_name)

    result = await EditUserUseCase(uow).execute(user_id_from(current_user), command)

    if result.is_err():
        error = result.err_value
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.ok_value
