"""Base Schema — shared Pydantic configuration for every API model.

Invariants:
    - Fields serialize by camelCase alias (companyId, userType, userGroups)
    - Input accepts either the alias or the Python field name
    - Response models read straight from core dataclass records
    - Email fields are checked for format and stored exactly as submitted

Design Decisions:
    - alias_generator over per-field aliases: one rule for all resources
    - Email over EmailStr: EmailStr normalizes the address and accepts
      "Name <addr>", so the record would differ from the request body
"""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


Email = Annotated[str, AfterValidator(_check_email)]


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PermissionsAssign(ApiModel):
    """Body of the assign-permissions operations. Replaces, never merges."""
    permissions: list[str]
