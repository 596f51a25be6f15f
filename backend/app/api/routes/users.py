"""Users Routes — CRUD and paginated listing under /users.

Invariants:
    - Handlers only bind parameters and delegate to UserService
    - Path ids are integers in 1..MAX_USER_ID (anything else is a 400)
    - PUT applies only the fields present in the request body
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from app.api.dependencies import get_user_service
from app.core.constants import MAX_USER_ID
from app.core.domain_types import UserId
from app.schemas.pagination import PaginatedResponse, PaginationParams
from app.schemas.user import (
    DeleteResponse, UserCreate, UserResponse, UserUpdate,
)
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])

# ids past the INTEGER column range are rejected before reaching the store
UserIdPath = Annotated[int, Path(ge=1, le=MAX_USER_ID)]

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "User not found"}}


@router.get(
    "",
    response_model=PaginatedResponse[UserResponse],
    summary="Get all users with pagination",
    responses={status.HTTP_400_BAD_REQUEST: {
        "description": "Page greater than the total pages",
    }},
)
async def find_all(
    pagination: Annotated[PaginationParams, Query()],
    service: UserService = Depends(get_user_service),
):
    """Retrieves a list of users with optional pagination."""
    return await service.find_all(pagination)


@router.get(
    "/{user_id}", response_model=UserResponse,
    summary="Find user by ID", responses=_NOT_FOUND,
)
async def find_one(
    user_id: UserIdPath, service: UserService = Depends(get_user_service),
):
    return await service.find_one(UserId(user_id))


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED, summary="Create user",
)
async def create(
    payload: UserCreate, service: UserService = Depends(get_user_service),
):
    return await service.create(payload.model_dump())


@router.put(
    "/{user_id}", response_model=UserResponse,
    summary="Update user", responses=_NOT_FOUND,
)
async def update(
    user_id: UserIdPath,
    payload: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    return await service.update(
        UserId(user_id), payload.model_dump(exclude_unset=True),
    )


@router.delete(
    "/{user_id}", response_model=DeleteResponse,
    summary="Delete user", responses=_NOT_FOUND,
)
async def remove(
    user_id: UserIdPath, service: UserService = Depends(get_user_service),
):
    return await service.remove(UserId(user_id))
