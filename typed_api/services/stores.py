"""Stores — the four resource stores owned by one application instance.

Invariants:
    - Each Stores instance owns four independent ResourceStore objects
    - The permission store starts with read, write, delete (in that order)
    - Users, user types and companies start empty

Design Decisions:
    - Built by build_stores() and attached to app.state: every create_app()
      gets fresh data, tests never share state (ADR: no ambient singletons)
"""

import logging
from dataclasses import dataclass

from typed_api.core.domain_types import (
    DEFAULT_PERMISSIONS, Company, Permission, User, UserType, new_record_id,
)
from typed_api.core.resource_store import ResourceStore

logger = logging.getLogger(__name__)


@dataclass
class Stores:
    users: ResourceStore[User]
    user_types: ResourceStore[UserType]
    companies: ResourceStore[Company]
    permissions: ResourceStore[Permission]


def seed_permissions() -> list[Permission]:
    return [
        Permission(id=new_record_id(), name=name, description=description)
        for name, description in DEFAULT_PERMISSIONS
    ]


def build_stores() -> Stores:
    """Create empty stores plus the seeded permission list."""
    stores = Stores(
        users=ResourceStore("users"),
        user_types=ResourceStore("userTypes"),
        companies=ResourceStore("companies"),
        permissions=ResourceStore("permissions", seed_permissions()),
    )
    logger.debug(f"Stores built with {len(stores.permissions)} seeded permissions")
    return stores
