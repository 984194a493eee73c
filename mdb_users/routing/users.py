"""
HTTP routes for the user resource.

Each handler extracts its input, calls one repository method and maps the
outcome to a status code. Failures are never retried.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..constants import USER_DELETED_MESSAGE
from ..dependencies import get_user_repository
from ..exceptions import InvalidInputError, UserServiceError
from ..models import InsertAcknowledgment, User
from ..repositories import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def _require_id(user_id: str) -> None:
    if not user_id:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "User id is required")


def _bad_request(e: InvalidInputError) -> HTTPException:
    return HTTPException(status.HTTP_400_BAD_REQUEST, e.message)


def _server_error(action: str, e: UserServiceError) -> HTTPException:
    logger.warning(f"Failed to {action} user: {e}")
    return HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Failed to {action} user")


@router.post("/user", response_model=InsertAcknowledgment)
async def create_user(
    new_user: User,
    users: UserRepository = Depends(get_user_repository),
) -> InsertAcknowledgment:
    data = User(name=new_user.name, location=new_user.location, title=new_user.title)
    try:
        inserted_id = await users.create(data)
    except UserServiceError as e:
        raise _server_error("create", e) from e
    return InsertAcknowledgment(inserted_id=inserted_id)


@router.get("/user/{user_id}", response_model=User)
async def get_user(
    user_id: str,
    users: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Fetch one user.

    A missing record is reported as 500, the same as a storage failure.
    """
    _require_id(user_id)
    try:
        return await users.get_by_id(user_id)
    except InvalidInputError as e:
        raise _bad_request(e) from e
    except UserServiceError as e:
        raise _server_error("get", e) from e


@router.put("/user/{user_id}", response_model=User)
async def update_user(
    user_id: str,
    new_user: User,
    users: UserRepository = Depends(get_user_repository),
) -> User:
    """Overwrite name, location and title, then return the stored record."""
    _require_id(user_id)
    data = User(name=new_user.name, location=new_user.location, title=new_user.title)
    try:
        matched = await users.update_by_id(user_id, data)
    except InvalidInputError as e:
        raise _bad_request(e) from e
    except UserServiceError as e:
        raise _server_error("update", e) from e

    if matched != 1:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "User not found")

    try:
        return await users.get_by_id(user_id)
    except UserServiceError as e:
        raise _server_error("update", e) from e


@router.delete("/user/{user_id}")
async def delete_user(
    user_id: str,
    users: UserRepository = Depends(get_user_repository),
) -> str:
    _require_id(user_id)
    try:
        deleted = await users.delete_by_id(user_id)
    except InvalidInputError as e:
        raise _bad_request(e) from e
    except UserServiceError as e:
        raise _server_error("delete", e) from e

    if deleted != 1:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "User not found")
    return USER_DELETED_MESSAGE


@router.get("/users", response_model=list[User])
async def get_all_users(
    users: UserRepository = Depends(get_user_repository),
) -> list[User]:
    try:
        return await users.list_all()
    except UserServiceError as e:
        raise _server_error("list", e) from e
