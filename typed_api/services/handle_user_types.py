"""User Type Handlers — CRUD and wholesale permission assignment for user types.

Invariants:
    - type follows the truthy-update rule; permissions follows the presence rule
    - assign_permissions replaces the whole list, never merges
    - Users referencing a type by label are not touched by any operation here
"""

from typed_api.core.domain_types import UserType, new_record_id
from typed_api.schemas.user_type import UserTypeCreate
from typed_api.services.handle_records import RecordHandlers


class UserTypeHandlers(RecordHandlers[UserType]):
    resource_name = "UserType"
    truthy_fields = ("type",)
    presence_fields = ("permissions",)

    def create(self, body: UserTypeCreate) -> UserType:
        user_type = UserType(
            id=new_record_id(),
            type=body.type,
            permissions=list(body.permissions or []),
        )
        return self._append(user_type)

    def assign_permissions(self, user_type_id: str, permissions: list[str]) -> UserType:
        with self.store.locked():
            user_type = self.get(user_type_id)
            user_type.permissions = list(permissions)
        self._log("permissions assigned", user_type_id, fields=["permissions"])
        return user_type
