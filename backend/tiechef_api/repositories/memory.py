"""
In-memory entity store conforming to the repository contract.

InMemoryStore holds the committed rows for one record kind for the whole
process: a map from id to record plus an id counter, both guarded by one
lock. InMemoryRepository is the per-request unit of work on top of it:
writes are staged in order and applied together on commit(), reads always
return copies so uncommitted edits never leak into the store.

find()/exists() take a plain Python predicate over the record.
"""

from __future__ import annotations

import copy
import threading
from typing import Any, Callable, Generic, Sequence, TypeVar

RecordT = TypeVar("RecordT")

_PUT = "put"
_REMOVE = "remove"


class InMemoryStore(Generic[RecordT]):
    """Committed rows for one record kind, keyed by the record's id attribute."""

    def __init__(self, id_attr: str):
        self._id_attr = id_attr
        self._rows: dict[int, RecordT] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    @property
    def id_attr(self) -> str:
        return self._id_attr

    def identity_of(self, record: RecordT) -> int | None:
        return getattr(record, self._id_attr)

    def snapshot(self) -> list[RecordT]:
        with self._lock:
            return [copy.deepcopy(self._rows[key]) for key in sorted(self._rows)]

    def get(self, record_id: int) -> RecordT | None:
        with self._lock:
            record = self._rows.get(record_id)
            return copy.deepcopy(record) if record is not None else None

    def apply(self, operations: Sequence[tuple[str, Any]]) -> None:
        """
        Apply staged operations in order under one lock.

        A put without an id gets the next counter value, written back onto
        the staged record. Later operations on the same id win. Removing an
        absent id is a no-op.
        """
        with self._lock:
            for op, payload in operations:
                if op == _PUT:
                    record_id = self.identity_of(payload)
                    if not record_id:
                        self._last_id += 1
                        record_id = self._last_id
                        setattr(payload, self._id_attr, record_id)
                    else:
                        self._last_id = max(self._last_id, record_id)
                    self._rows[record_id] = copy.deepcopy(payload)
                elif op == _REMOVE:
                    self._rows.pop(payload, None)

    def clear(self) -> None:
        with self._lock:
            self._rows.clear()
            self._last_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)


class InMemoryRepository(Generic[RecordT]):
    """Unit of work over an InMemoryStore."""

    def __init__(self, store: InMemoryStore[RecordT]):
        self._store = store
        self._pending: list[tuple[str, Any]] = []

    @property
    def store(self) -> InMemoryStore[RecordT]:
        return self._store

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    # Reads

    def get_all(self) -> list[RecordT]:
        return self._store.snapshot()

    def get_by_id(self, record_id: int) -> RecordT | None:
        return self._store.get(record_id)

    def find(self, predicate: Callable[[RecordT], bool]) -> list[RecordT]:
        return [record for record in self._store.snapshot() if predicate(record)]

    def exists(self, predicate: Callable[[RecordT], bool] | None = None) -> bool:
        if predicate is None:
            return len(self._store) > 0
        return any(predicate(record) for record in self._store.snapshot())

    def count(self) -> int:
        return len(self._store)

    # Staged writes

    def add(self, record: RecordT) -> RecordT:
        self._pending.append((_PUT, record))
        return record

    def add_range(self, records: Sequence[RecordT]) -> Sequence[RecordT]:
        for record in records:
            self.add(record)
        return records

    def update(self, record: RecordT) -> RecordT:
        self._pending.append((_PUT, record))
        return record

    def delete(self, record: RecordT) -> None:
        self._pending.append((_REMOVE, self._store.identity_of(record)))

    def delete_by_id(self, record_id: int) -> bool:
        if self._store.get(record_id) is None:
            return False
        self._pending.append((_REMOVE, record_id))
        return True

    def commit(self) -> None:
        operations, self._pending = self._pending, []
        self._store.apply(operations)

    def rollback(self) -> None:
        self._pending = []
