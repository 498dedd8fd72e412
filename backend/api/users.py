from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List
from dependencies import get_user_service
from dtos.response.user_response import UserRecord
from services.interfaces import IUserService
from utils.error_handlers import handle_api_errors
from constants import ApiPaths, HTTPStatus
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix=ApiPaths.USERS, tags=["users"])


@router.get(
    "",
    response_model=List[UserRecord],
    responses={HTTPStatus.NO_CONTENT: {"description": "No users stored"}},
)
@handle_api_errors("Get users")
def get_users(user_service: IUserService = Depends(get_user_service)):
    """
    Get every user as a transfer record.

    Returns:
        List[UserRecord]: id, username and email of each stored user, or an
        empty 204 response when there is nothing to show
    """
    users = user_service.get_users()

    if not users:
        return Response(status_code=HTTPStatus.NO_CONTENT)

    return users


@router.get(
    "/{user_id}",
    response_model=UserRecord,
    responses={HTTPStatus.NOT_FOUND: {"description": "User not found"}},
)
@handle_api_errors("Get user")
def get_user(user_id: int, user_service: IUserService = Depends(get_user_service)):
    """
    Get a specific user as a transfer record.

    Args:
        user_id: User ID

    Returns:
        UserRecord: id, username and email of the user

    Raises:
        HTTPException: If the user does not exist
    """
    user = user_service.get_user_by_id(user_id)

    if user is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=f"User '{user_id}' not found")

    return user
