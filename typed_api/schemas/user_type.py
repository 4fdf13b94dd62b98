"""User Type Schemas."""

from typed_api.schemas.base import ApiModel


class UserTypeCreate(ApiModel):
    type: str
    permissions: list[str] | None = None


class UserTypeUpdate(ApiModel):
    type: str | None = None
    permissions: list[str] | None = None


class UserTypeResponse(ApiModel):
    id: str
    type: str
    permissions: list[str]
