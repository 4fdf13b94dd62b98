"""Users Routes — CRUD, label filters and permission assignment under /users.

Invariants:
    - POST answers 201 with no body; PUT/DELETE answer 200 with no body
    - Unknown ids answer 404 with no body (ResourceNotFoundError handler)
    - companyId is omitted from user payloads when unset (exclude_none)
    - Filter routes always answer 200, [] when nothing matches

Design Decisions:
    - Path params are snake_case; body and payload fields are camelCase
"""

from fastapi import APIRouter, Depends, Response, status

from typed_api.api.dependencies import get_user_handlers
from typed_api.schemas.base import PermissionsAssign
from typed_api.schemas.user import UserCreate, UserResponse, UserUpdate
from typed_api.services.handle_users import UserHandlers

router = APIRouter(prefix="/users", tags=["Users"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "User not found"}}


@router.get(
    "", response_model=list[UserResponse], response_model_exclude_none=True,
    description="Get all users", response_description="List of users",
)
async def list_users(handlers: UserHandlers = Depends(get_user_handlers)):
    return handlers.list_all()


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_class=Response,
    description="Create a new user", response_description="User created successfully",
)
async def create_user(
    body: UserCreate, handlers: UserHandlers = Depends(get_user_handlers),
):
    handlers.create(body)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get(
    "/type/{user_type}", response_model=list[UserResponse],
    response_model_exclude_none=True,
    description="Get users by type", response_description="List of users by type",
)
async def list_users_by_type(
    user_type: str,
    handlers: UserHandlers = Depends(get_user_handlers),
):
    return handlers.list_by_type(user_type)


@router.get(
    "/company/{company_id}", response_model=list[UserResponse],
    response_model_exclude_none=True,
    description="Get users by company", response_description="List of users by company",
)
async def list_users_by_company(
    company_id: str,
    handlers: UserHandlers = Depends(get_user_handlers),
):
    return handlers.list_by_company(company_id)


@router.get(
    "/company/{company_id}/type/{user_type}", response_model=list[UserResponse],
    response_model_exclude_none=True,
    description="Get users by type within a company",
    response_description="List of users by type within a company",
)
async def list_users_by_company_and_type(
    company_id: str,
    user_type: str,
    handlers: UserHandlers = Depends(get_user_handlers),
):
    return handlers.list_by_company_and_type(company_id, user_type)


@router.get(
    "/{user_id}", response_model=UserResponse, response_model_exclude_none=True,
    responses=NOT_FOUND,
    description="Get a user by ID", response_description="User details",
)
async def get_user(
    user_id: str,
    handlers: UserHandlers = Depends(get_user_handlers),
):
    return handlers.get(user_id)


@router.put(
    "/{user_id}", response_class=Response, responses=NOT_FOUND,
    description="Update a user by ID", response_description="User updated successfully",
)
async def update_user(
    body: UserUpdate,
    user_id: str,
    handlers: UserHandlers = Depends(get_user_handlers),
):
    handlers.update(user_id, body)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{user_id}", response_class=Response, responses=NOT_FOUND,
    description="Delete a user by ID", response_description="User deleted successfully",
)
async def delete_user(
    user_id: str,
    handlers: UserHandlers = Depends(get_user_handlers),
):
    handlers.delete(user_id)
    return Response(status_code=status.HTTP_200_OK)


@router.put(
    "/{user_id}/permissions", response_class=Response, responses=NOT_FOUND,
    description="Assign permissions to a user",
    response_description="Permissions assigned successfully",
)
async def assign_user_permissions(
    body: PermissionsAssign,
    user_id: str,
    handlers: UserHandlers = Depends(get_user_handlers),
):
    handlers.assign_permissions(user_id, body.permissions)
    return Response(status_code=status.HTTP_200_OK)
