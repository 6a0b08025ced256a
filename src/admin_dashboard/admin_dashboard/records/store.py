from __future__ import annotations

from dataclasses import replace as dc_replace
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

from ..common.logger import get_logger

logger = get_logger(__name__)

R = TypeVar("R")


class KeySequence:
    """Monotonic key generator; a key handed out once is never handed out again."""

    def __init__(self, start: int = 1):
        self._next = max(int(start), 1)

    @classmethod
    def following(cls, keys: Iterable[str], count: int) -> "KeySequence":
        highest = count
        for key in keys:
            if str(key).isdigit():
                highest = max(highest, int(key))
        return cls(highest + 1)

    def peek(self) -> str:
        return str(self._next)

    def take(self) -> str:
        key = str(self._next)
        self._next += 1
        return key


class RecordStore(Generic[R]):
    """Ordered, uniquely keyed records owned by one page view.

    Records are frozen dataclasses carrying a ``key`` field; the store stamps
    the generated key on insert.
    """

    def __init__(self, records: Iterable[R] = (), *, name: str = "records"):
        self._name = name
        self._records: list[R] = []
        for record in records:
            if self.get(record.key) is not None:
                raise ValueError(f"Duplicate key {record.key!r} in {name}")
            self._records.append(record)
        self._keys = KeySequence.following((r.key for r in self._records), len(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(list(self._records))

    def list(self) -> list[R]:
        return list(self._records)

    def get(self, key: str) -> Optional[R]:
        for record in self._records:
            if record.key == key:
                return record
        return None

    def peek_key(self) -> str:
        """Key the next insert will receive."""
        return self._keys.peek()

    def insert(self, record: R) -> R:
        stored = dc_replace(record, key=self._keys.take())
        self._records.append(stored)
        logger.info("%s: inserted key=%s", self._name, stored.key)
        return stored

    def replace(self, key: str, record: R) -> bool:
        """Replace the record stored under ``key`` in place.

        Missing keys are a no-op (returns False).
        """

        for i, current in enumerate(self._records):
            if current.key == key:
                self._records[i] = dc_replace(record, key=key)
                logger.info("%s: replaced key=%s", self._name, key)
                return True
        logger.warning("%s: replace ignored, key=%s not found", self._name, key)
        return False

    def remove(self, key: str) -> bool:
        before = len(self._records)
        self._records = [r for r in self._records if r.key != key]
        removed = len(self._records) != before
        if removed:
            logger.info("%s: removed key=%s", self._name, key)
        return removed

    def remove_where(self, predicate: Callable[[R], bool]) -> int:
        before = len(self._records)
        self._records = [r for r in self._records if not predicate(r)]
        return before - len(self._records)
