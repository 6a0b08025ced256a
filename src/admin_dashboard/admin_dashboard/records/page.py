from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Mapping, Optional, TypeVar

from ..common.logger import get_logger
from ..core.exceptions import AttachmentReadError, RecordNotFoundError, ValidationError
from .session import Creating, EditSession, Editing
from .filtering import filter_records
from .serialization import to_jsonable
from .form import RecordForm
from .store import RecordStore

logger = get_logger(__name__)

R = TypeVar("R")
T = TypeVar("T")


class RecordPage(Generic[R]):
    """Tabular CRUD manager: one store, one search term, one edit session.

    Subclasses hook extra behavior (cascades, staged sub-items) into
    ``_before_confirm`` / ``_after_remove``.
    """

    def __init__(self, name: str, form: RecordForm[R], records: Iterable[R] = ()):
        self.name = name
        self.form = form
        self.store: RecordStore[R] = RecordStore(records, name=name)
        self.session = EditSession()
        self.search_term = ""

    def row(self, record: R) -> dict[str, Any]:
        """Table row for one record."""
        return to_jsonable(record)

    # Filter View
    def search(self, term: Optional[str]) -> list[R]:
        self.search_term = term or ""
        return self.visible()

    def visible(self) -> list[R]:
        return filter_records(self.store.list(), self.search_term, self.form.search_fields)

    def get(self, key: str) -> R:
        record = self.store.get(key)
        if record is None:
            raise RecordNotFoundError(f"{self.form.title} {key} not found")
        return record

    # Edit Session
    def open_create(self) -> dict[str, Any]:
        self.session.begin_create(self.form.defaults(self.store))
        return dict(self.session.draft)

    def open_edit(self, key: str) -> dict[str, Any]:
        record = self.get(key)
        self.session.begin_edit(key, self.form.to_values(record))
        return dict(self.session.draft)

    def confirm(self, values: Optional[Mapping[str, Any]] = None) -> R:
        state = self.session.require_open()
        submitted = {k: v for k, v in dict(values or {}).items() if k not in self.form.staged_fields}
        merged = {**self.session.draft, **submitted}
        self.session.draft = merged
        previous = self.store.get(state.key) if isinstance(state, Editing) else None

        try:
            self._before_confirm(merged, previous)
            record = self.form.build(merged, previous=previous)
        except ValidationError as e:
            self.session.fail(e.errors or {"form": str(e)})
            logger.info("%s: validation failed %s", self.name, sorted(self.session.errors))
            raise

        if isinstance(state, Creating):
            record = self.store.insert(record)
        else:
            self.store.replace(state.key, record)
            record = self.store.get(state.key) or record
        self.session.close()
        return record

    def cancel(self) -> None:
        self.session.require_open()
        self.session.close()

    def delete(self, key: str) -> bool:
        record = self.store.get(key)
        if record is None:
            return False
        self.store.remove(key)
        self._after_remove(record)
        return True

    def read_upload(self, read: Callable[..., T], file: Any, **kwargs: Any) -> T:
        """Run an attachment reader for the open session.

        A failed read is recorded as a field error on the session, which stays
        open with its draft untouched.
        """

        self.session.require_open()
        try:
            return read(file, **kwargs)
        except AttachmentReadError as e:
            self.session.fail({**self.session.errors, **e.errors})
            raise

    def _before_confirm(self, values: Mapping[str, Any], previous: Optional[R]) -> None:
        """Extra cross-record validation; raise ValidationError to keep the session open."""

    def _after_remove(self, record: R) -> None:
        pass
