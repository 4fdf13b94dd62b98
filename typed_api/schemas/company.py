"""Company Schemas — company documents with their embedded (inert) user lists.

Invariants:
    - cnpj is a free string; no checksum or format validation
    - users and userGroups are response-only; create/update bodies cannot set them
"""

from typed_api.schemas.base import ApiModel


class CompanyCreate(ApiModel):
    name: str
    cnpj: str


class CompanyUpdate(ApiModel):
    name: str | None = None
    cnpj: str | None = None


class CompanyUserResponse(ApiModel):
    id: str
    name: str
    email: str
    user_type: str


class UserGroupResponse(ApiModel):
    id: str
    name: str
    users: list[CompanyUserResponse]


class CompanyResponse(ApiModel):
    id: str
    name: str
    cnpj: str
    users: list[CompanyUserResponse]
    user_groups: list[UserGroupResponse]
