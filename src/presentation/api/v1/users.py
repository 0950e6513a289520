"""User API endpoints."""

import logging
import uuid
from datetime import date, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel, Field, field_validator

from ....application.use_cases.users import (
    CreateUserCommand,
    CreateUserUseCase,
    DeleteUserCommand,
    DeleteUserUseCase,
    GetAllUsersQuery,
    GetAllUsersUseCase,
    GetUserByIdQuery,
    GetUserByIdUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
)
from ....domain.entities import User
from ....domain.exceptions import (
    UnknownUserRoleError,
    UserNotFoundError,
)
from ....domain.value_objects import Paged, UserId
from ....infrastructure.config import get_settings
from ...dependencies import (
    get_actor_id,
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_all_users_use_case,
    get_get_user_by_id_use_case,
    get_update_user_use_case,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])

ActorId = Annotated[UserId, Depends(get_actor_id)]

EMAIL_PATTERN = r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)+$"


class UserProfileRequest(BaseModel):
    """Fields shared by the create and update requests."""

    name: str = Field(..., min_length=1, max_length=255, description="User name")
    email: str = Field(
        ..., max_length=255, pattern=EMAIL_PATTERN, description="User email address"
    )
    password: str = Field(..., min_length=1, max_length=255, description="Password")
    birth_date: date = Field(..., description="Birth date (must be in the past)")
    phone: str = Field(..., min_length=1, max_length=50, description="Phone number")

    @field_validator("name", "password", "phone")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only values."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: date) -> date:
        """Require a birth date in the past."""
        if v >= date.today():
            raise ValueError("birth_date must be in the past")
        return v


class CreateUserRequest(UserProfileRequest):
    """Create user request model."""

    role: int = Field(
        ..., strict=True, description="Role code (0: SYSTEM, 1: ADMIN, 2: USER)"
    )

    def to_command(self, created_by: UserId) -> CreateUserCommand:
        """Build the use case command."""
        return CreateUserCommand(
            name=self.name,
            email=self.email,
            password=self.password,
            birth_date=self.birth_date,
            phone=self.phone,
            role=self.role,
            created_by=created_by,
        )


class UpdateUserRequest(UserProfileRequest):
    """Update user request model."""

    id: uuid.UUID = Field(..., description="ID of the user to update")

    def to_command(self, updated_by: UserId) -> UpdateUserCommand:
        """Build the use case command."""
        return UpdateUserCommand(
            id=UserId.from_uuid(self.id),
            name=self.name,
            email=self.email,
            password=self.password,
            birth_date=self.birth_date,
            phone=self.phone,
            updated_by=updated_by,
        )


class UserResponse(BaseModel):
    """User response model."""

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="User name")
    email: str = Field(..., description="User email address")
    phone: str = Field(..., description="Phone number")
    role: int = Field(..., description="Role code")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        """Create a response from the domain entity."""
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            phone=user.phone,
            role=user.role.code,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class PagedUserResponse(BaseModel):
    """Paged users response model."""

    items: list[UserResponse] = Field(..., description="Users on this page")
    page: int = Field(..., description="Zero-based page index")
    page_size: int = Field(..., description="Number of users per page")
    total_items: int = Field(..., description="Total number of users")
    total_pages: int = Field(..., description="Total number of pages")

    @classmethod
    def from_domain(cls, paged: Paged[User]) -> "PagedUserResponse":
        """Create a response from a page of domain entities."""
        responses = paged.map(UserResponse.from_domain)
        return cls(
            items=responses.items,
            page=responses.page,
            page_size=responses.page_size,
            total_items=responses.total_items,
            total_pages=responses.total_pages,
        )


def _server_error(e: Exception) -> HTTPException:
    logger.error("Unexpected error while handling user request: %s", e)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(e),
    )


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    request: CreateUserRequest,
    actor_id: ActorId,
    use_case: Annotated[CreateUserUseCase, Depends(get_create_user_use_case)],
) -> UserResponse:
    """Create a user.

    Raises:
        HTTPException: 400 if the role code is unknown, 500 on store failure
    """
    try:
        user = await use_case.execute(request.to_command(created_by=actor_id))
        return UserResponse.from_domain(user)
    except UnknownUserRoleError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except Exception as e:
        raise _server_error(e) from e


@router.put("", response_model=UserResponse)
async def update_user(
    request: UpdateUserRequest,
    actor_id: ActorId,
    use_case: Annotated[UpdateUserUseCase, Depends(get_update_user_use_case)],
) -> UserResponse:
    """Update a user.

    Raises:
        HTTPException: 404 if the user does not exist, 500 on store failure
    """
    try:
        user = await use_case.execute(request.to_command(updated_by=actor_id))
        return UserResponse.from_domain(user)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception as e:
        raise _server_error(e) from e


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: uuid.UUID,
    actor_id: ActorId,
    use_case: Annotated[DeleteUserUseCase, Depends(get_delete_user_use_case)],
) -> None:
    """Soft-delete a user.

    Raises:
        HTTPException: 404 if the user does not exist, 500 on store failure
    """
    try:
        await use_case.execute(
            DeleteUserCommand(id=UserId.from_uuid(user_id), deleted_by=actor_id)
        )
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception as e:
        raise _server_error(e) from e


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: uuid.UUID,
    use_case: Annotated[GetUserByIdUseCase, Depends(get_get_user_by_id_use_case)],
) -> UserResponse | Response:
    """Get a user by ID.

    Returns an empty 404 response when no live user has the ID.
    """
    try:
        user = await use_case.execute(GetUserByIdQuery(id=UserId.from_uuid(user_id)))
    except Exception as e:
        raise _server_error(e) from e

    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return UserResponse.from_domain(user)


@router.get("", response_model=PagedUserResponse)
async def get_users(
    use_case: Annotated[GetAllUsersUseCase, Depends(get_get_all_users_use_case)],
    page: Annotated[int, Query(ge=0, description="Zero-based page index")] = 0,
    page_size: Annotated[
        int | None, Query(ge=1, description="Number of users per page")
    ] = None,
) -> PagedUserResponse:
    """Get one page of users.

    Raises:
        HTTPException: 400 if page_size exceeds the configured maximum
    """
    settings = get_settings()
    size = page_size or settings.default_page_size
    if size > settings.max_page_size:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"page_size must not exceed {settings.max_page_size}",
        )

    try:
        paged = await use_case.execute(GetAllUsersQuery(page=page, page_size=size))
    except Exception as e:
        raise _server_error(e) from e

    return PagedUserResponse.from_domain(paged)
