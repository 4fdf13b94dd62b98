"""User Handlers — CRUD, label filters and permission assignment for users.

Invariants:
    - create assigns a fresh id and defaults permissions to []
    - name, email, user_type follow the truthy-update rule
    - company_id and permissions follow the presence rule; company_id may be cleared with null
    - Filters are exact equality on labels and keep insertion order ([] when none match)
    - assign_permissions replaces the whole list, never merges

Design Decisions:
    - companyId/userType are not checked against the company or user-type stores
      (ADR: labels, no referential integrity)
"""

from typed_api.core.domain_types import User, new_record_id
from typed_api.schemas.user import UserCreate
from typed_api.services.handle_records import RecordHandlers


class UserHandlers(RecordHandlers[User]):
    resource_name = "User"
    truthy_fields = ("name", "email", "user_type")
    presence_fields = ("company_id", "permissions")
    nullable_fields = ("company_id",)

    def create(self, body: UserCreate) -> User:
        user = User(
            id=new_record_id(),
            name=body.name,
            email=str(body.email),
            company_id=body.company_id,
            user_type=body.user_type,
            permissions=list(body.permissions or []),
        )
        return self._append(user)

    def list_by_type(self, user_type: str) -> list[User]:
        return self.store.filter(lambda u: u.user_type == user_type)

    def list_by_company(self, company_id: str) -> list[User]:
        return self.store.filter(lambda u: u.company_id == company_id)

    def list_by_company_and_type(self, company_id: str, user_type: str) -> list[User]:
        return self.store.filter(
            lambda u: u.company_id == company_id and u.user_type == user_type,
        )

    def assign_permissions(self, user_id: str, permissions: list[str]) -> User:
        with self.store.locked():
            user = self.get(user_id)
            user.permissions = list(permissions)
        self._log("permissions assigned", user_id, fields=["permissions"])
        return user
