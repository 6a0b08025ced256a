from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Mapping, Optional, TypeVar

from .filtering import FieldAccessor
from .store import RecordStore

R = TypeVar("R")


class RecordForm(ABC, Generic[R]):
    """Form definition for one record type (Template Method for the add/edit modal).

    ``build`` validates the submitted values and returns a new record, raising
    ``ValidationError`` with one message per invalid field. New records are
    built with an empty key; the store assigns it on insert.
    """

    title: ClassVar[str] = "Record"
    search_fields: ClassVar[tuple[FieldAccessor, ...]] = ()
    # Fields only set through staging (uploads, nested dialogs); ignored in submitted values.
    staged_fields: ClassVar[tuple[str, ...]] = ()

    def defaults(self, store: RecordStore[R]) -> dict[str, Any]:
        return {}

    @abstractmethod
    def to_values(self, record: R) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def build(self, values: Mapping[str, Any], *, previous: Optional[R]) -> R:
        raise NotImplementedError
