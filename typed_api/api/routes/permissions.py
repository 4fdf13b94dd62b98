"""Permissions Routes — CRUD under /permissions."""

from fastapi import APIRouter, Depends, Response, status

from typed_api.api.dependencies import get_permission_handlers
from typed_api.schemas.permission import (
    PermissionCreate, PermissionResponse, PermissionUpdate,
)
from typed_api.services.handle_permissions import PermissionHandlers

router = APIRouter(prefix="/permissions", tags=["Permissions"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Permission not found"}}


@router.get(
    "", response_model=list[PermissionResponse],
    description="Get all permissions", response_description="List of permissions",
)
async def list_permissions(
    handlers: PermissionHandlers = Depends(get_permission_handlers),
):
    return handlers.list_all()


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_class=Response,
    description="Create a new permission",
    response_description="Permission created successfully",
)
async def create_permission(
    body: PermissionCreate,
    handlers: PermissionHandlers = Depends(get_permission_handlers),
):
    handlers.create(body)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get(
    "/{permission_id}", response_model=PermissionResponse, responses=NOT_FOUND,
    description="Get a permission by ID", response_description="Permission details",
)
async def get_permission(
    permission_id: str,
    handlers: PermissionHandlers = Depends(get_permission_handlers),
):
    return handlers.get(permission_id)


@router.put(
    "/{permission_id}", response_class=Response, responses=NOT_FOUND,
    description="Update a permission by ID",
    response_description="Permission updated successfully",
)
async def update_permission(
    body: PermissionUpdate,
    permission_id: str,
    handlers: PermissionHandlers = Depends(get_permission_handlers),
):
    handlers.update(permission_id, body)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{permission_id}", response_class=Response, responses=NOT_FOUND,
    description="Delete a permission by ID",
    response_description="Permission deleted successfully",
)
async def delete_permission(
    permission_id: str,
    handlers: PermissionHandlers = Depends(get_permission_handlers),
):
    handlers.delete(permission_id)
    return Response(status_code=status.HTTP_200_OK)
