"""Resource Store — ordered in-memory collection of one record type.

Invariants:
    - Insertion order is preserved; append always adds at the end
    - Lookups are linear scans returning the first match
    - find_index returns -1 when nothing matches (remove_at is never called with it)
    - Every operation holds the store's lock; compound operations use locked()

Design Decisions:
    - One RLock per store: the async routes run handlers on the event loop and
      never need it; it keeps each store consistent for any caller that
      reaches it from a thread
    - RLock over Lock: handlers nest find/remove_at inside locked()
    - all() and filter() return new lists so callers never iterate a list
      another request is mutating
"""

import threading
from contextlib import contextmanager
from typing import Callable, Generic, Iterable, Iterator, TypeVar

RecordT = TypeVar("RecordT")
Predicate = Callable[[RecordT], bool]


class ResourceStore(Generic[RecordT]):
    """Process-lifetime, insertion-ordered store for records of one type."""

    def __init__(self, name: str, records: Iterable[RecordT] = ()):
        self.name = name
        self._records: list[RecordT] = list(records)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __repr__(self) -> str:
        return f"ResourceStore(name={self.name!r}, size={len(self)})"

    @contextmanager
    def locked(self) -> Iterator["ResourceStore[RecordT]"]:
        """Hold the store lock across a find-then-mutate sequence."""
        with self._lock:
            yield self

    def append(self, record: RecordT) -> RecordT:
        with self._lock:
            self._records.append(record)
            return record

    def all(self) -> list[RecordT]:
        with self._lock:
            return list(self._records)

    def find(self, predicate: Predicate) -> RecordT | None:
        with self._lock:
            for record in self._records:
                if predicate(record):
                    return record
            return None

    def find_index(self, predicate: Predicate) -> int:
        with self._lock:
            for index, record in enumerate(self._records):
                if predicate(record):
                    return index
            return -1

    def filter(self, predicate: Predicate) -> list[RecordT]:
        with self._lock:
            return [record for record in self._records if predicate(record)]

    def remove_at(self, index: int) -> RecordT:
        """Remove and return the record at index. Raises IndexError if out of range."""
        with self._lock:
            if index < 0 or index >= len(self._records):
                raise IndexError(f"{self.name} store has no record at index {index}")
            return self._records.pop(index)
