"""Record Handlers — list/get/update/delete shared by every resource.

Invariants:
    - list_all returns the whole store in insertion order (no filter, no paging)
    - get/update/delete look up by id with a linear scan
    - A miss raises ResourceNotFoundError and performs zero mutation
    - update and delete hold the store lock between lookup and mutation

Design Decisions:
    - Subclasses declare resource_name and the partial-update field rules;
      create() stays per resource because each builds a different record
"""

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from typed_api.core.errors import ResourceNotFoundError
from typed_api.core.partial_update import apply_partial_update
from typed_api.core.resource_store import ResourceStore

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class RecordHandlers(Generic[RecordT]):
    """CRUD operations over one ResourceStore."""

    resource_name: str = "Record"
    truthy_fields: tuple[str, ...] = ()
    presence_fields: tuple[str, ...] = ()
    nullable_fields: tuple[str, ...] = ()

    def __init__(self, store: ResourceStore[RecordT]):
        self.store = store

    def list_all(self) -> list[RecordT]:
        return self.store.all()

    def get(self, record_id: str) -> RecordT:
        record = self.store.find(lambda r: r.id == record_id)
        if record is None:
            raise ResourceNotFoundError(self.resource_name, record_id)
        return record

    def update(self, record_id: str, body: BaseModel) -> list[str]:
        """Apply the fields present in body. Returns the fields written."""
        changes = body.model_dump(exclude_unset=True)
        with self.store.locked():
            record = self.get(record_id)
            written = apply_partial_update(
                record, changes,
                truthy_fields=self.truthy_fields,
                presence_fields=self.presence_fields,
                nullable_fields=self.nullable_fields,
            )
        self._log("updated", record_id, fields=written)
        return written

    def delete(self, record_id: str) -> RecordT:
        with self.store.locked():
            index = self.store.find_index(lambda r: r.id == record_id)
            if index == -1:
                raise ResourceNotFoundError(self.resource_name, record_id)
            removed = self.store.remove_at(index)
        self._log("deleted", record_id)
        return removed

    def _append(self, record: Any) -> Any:
        self.store.append(record)
        self._log("created", record.id)
        return record

    def _log(self, action: str, record_id: str, **extra) -> None:
        logger.info(
            f"{self.resource_name} {record_id} {action}",
            extra={"resource": self.resource_name, "resource_id": record_id, **extra},
        )
