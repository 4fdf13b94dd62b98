"""User Schemas — create/update bodies and the public user shape.

Invariants:
    - email must be a syntactically valid address on create and on update
    - permissions defaults to [] on create
    - companyId may be omitted; when present it is an unchecked company label

Design Decisions:
    - Email (email-validator) for format checks only; no uniqueness check,
      no normalization
"""

from typed_api.schemas.base import ApiModel, Email


class UserCreate(ApiModel):
    name: str
    email: Email
    company_id: str | None = None
    user_type: str
    permissions: list[str] | None = None


class UserUpdate(ApiModel):
    """All fields optional; absent fields leave the stored value untouched."""
    name: str | None = None
    email: Email | None = None
    company_id: str | None = None
    user_type: str | None = None
    permissions: list[str] | None = None


class UserResponse(ApiModel):
    id: str
    name: str
    email: str
    company_id: str | None = None
    user_type: str
    permissions: list[str]
