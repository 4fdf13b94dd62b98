"""Partial Update — applies a validated update body to a record in place.

Invariants:
    - Fields absent from the change set are never touched
    - Truthy fields are overwritten only when the new value is truthy
      (an empty string cannot clear a name; known sharp edge, kept on purpose)
    - Presence fields are overwritten whenever the key is present, even with [] or ""
    - None is written only to nullable fields; elsewhere it counts as not provided
    - Returns the names of the fields that were written, in change-set order

Design Decisions:
    - Rules declared per resource as field tuples: handlers stay one-liners
    - Pure function over dataclass attributes: no HTTP or store knowledge
"""

from typing import Any, Iterable


def apply_partial_update(
    record: Any,
    changes: dict[str, Any],
    truthy_fields: Iterable[str] = (),
    presence_fields: Iterable[str] = (),
    nullable_fields: Iterable[str] = (),
) -> list[str]:
    """Write allowed changes onto record. Unknown keys are ignored."""
    truthy = set(truthy_fields)
    presence = set(presence_fields)
    nullable = set(nullable_fields)
    written = []
    for name, value in changes.items():
        if value is None and name not in nullable:
            continue
        if name in presence or (name in truthy and value):
            setattr(record, name, value)
            written.append(name)
    return written
