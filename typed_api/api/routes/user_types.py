"""User Types Routes — CRUD and permission assignment under /userTypes."""

from fastapi import APIRouter, Depends, Response, status

from typed_api.api.dependencies import get_user_type_handlers
from typed_api.schemas.base import PermissionsAssign
from typed_api.schemas.user_type import UserTypeCreate, UserTypeResponse, UserTypeUpdate
from typed_api.services.handle_user_types import UserTypeHandlers

router = APIRouter(prefix="/userTypes", tags=["User Types"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "User type not found"}}


@router.get(
    "", response_model=list[UserTypeResponse],
    description="Get all user types", response_description="List of user types",
)
async def list_user_types(handlers: UserTypeHandlers = Depends(get_user_type_handlers)):
    return handlers.list_all()


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_class=Response,
    description="Create a new user type",
    response_description="User type created successfully",
)
async def create_user_type(
    body: UserTypeCreate, handlers: UserTypeHandlers = Depends(get_user_type_handlers),
):
    handlers.create(body)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get(
    "/{user_type_id}", response_model=UserTypeResponse, responses=NOT_FOUND,
    description="Get a user type by ID", response_description="User type details",
)
async def get_user_type(
    user_type_id: str,
    handlers: UserTypeHandlers = Depends(get_user_type_handlers),
):
    return handlers.get(user_type_id)


@router.put(
    "/{user_type_id}", response_class=Response, responses=NOT_FOUND,
    description="Update a user type by ID",
    response_description="User type updated successfully",
)
async def update_user_type(
    body: UserTypeUpdate,
    user_type_id: str,
    handlers: UserTypeHandlers = Depends(get_user_type_handlers),
):
    handlers.update(user_type_id, body)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{user_type_id}", response_class=Response, responses=NOT_FOUND,
    description="Delete a user type by ID",
    response_description="User type deleted successfully",
)
async def delete_user_type(
    user_type_id: str,
    handlers: UserTypeHandlers = Depends(get_user_type_handlers),
):
    handlers.delete(user_type_id)
    return Response(status_code=status.HTTP_200_OK)


@router.put(
    "/{user_type_id}/permissions", response_class=Response, responses=NOT_FOUND,
    description="Assign permissions to a user type",
    response_description="Permissions assigned successfully",
)
async def assign_user_type_permissions(
    body: PermissionsAssign,
    user_type_id: str,
    handlers: UserTypeHandlers = Depends(get_user_type_handlers),
):
    handlers.assign_permissions(user_type_id, body.permissions)
    return Response(status_code=status.HTTP_200_OK)
