"""Domain Types — in-memory records for the four resources plus id generation.

Invariants:
    - Every record id is a random UUID4 string assigned once, on create
    - companyId, userType and permission names are free labels (no referential checks)
    - Company.users and Company.user_groups start empty and are never synced with users

Design Decisions:
    - Mutable dataclasses over ORM models: records live only in process memory
      and handlers update them in place
    - Labels stay plain str, not NewType: nothing validates them against other stores
"""

from dataclasses import dataclass, field
from typing import NewType
from uuid import uuid4


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", str)


def new_record_id() -> RecordId:
    """Generate a fresh, random record identifier."""
    return RecordId(str(uuid4()))


# ─── Records ─────────────────────────────────────────────────────

@dataclass
class User:
    id: RecordId
    name: str
    email: str
    user_type: str
    company_id: str | None = None
    permissions: list[str] = field(default_factory=list)


@dataclass
class UserType:
    id: RecordId
    type: str
    permissions: list[str] = field(default_factory=list)


@dataclass
class CompanyUser:
    """User summary embedded in a company document."""
    id: str
    name: str
    email: str
    user_type: str


@dataclass
class UserGroup:
    id: str
    name: str
    users: list[CompanyUser] = field(default_factory=list)


@dataclass
class Company:
    id: RecordId
    name: str
    cnpj: str
    users: list[CompanyUser] = field(default_factory=list)
    user_groups: list[UserGroup] = field(default_factory=list)


@dataclass
class Permission:
    id: RecordId
    name: str
    description: str


# (name, description) seeded into every new permission store, in this order
DEFAULT_PERMISSIONS: tuple[tuple[str, str], ...] = (
    ("read", "Read permission"),
    ("write", "Write permission"),
    ("delete", "Delete permission"),
)
