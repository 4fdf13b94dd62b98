"""Permission Schemas."""

from typed_api.schemas.base import ApiModel


class PermissionCreate(ApiModel):
    name: str
    description: str


class PermissionUpdate(ApiModel):
    name: str | None = None
    description: str | None = None


class PermissionResponse(ApiModel):
    id: str
    name: str
    description: str
