"""Permission Handlers — CRUD for the permission catalogue.

Invariants:
    - Seeded records (read, write, delete) behave like any other: updatable, deletable
    - Renaming or deleting a permission does not touch the labels held by users
      or user types
"""

from typed_api.core.domain_types import Permission, new_record_id
from typed_api.schemas.permission import PermissionCreate
from typed_api.services.handle_records import RecordHandlers


class PermissionHandlers(RecordHandlers[Permission]):
    resource_name = "Permission"
    truthy_fields = ("name", "description")

    def create(self, body: PermissionCreate) -> Permission:
        permission = Permission(
            id=new_record_id(), name=body.name, description=body.description,
        )
        return self._append(permission)
