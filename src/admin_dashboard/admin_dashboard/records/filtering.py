from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence, TypeVar, Union

R = TypeVar("R")

# Attribute name, or a callable returning one string / several strings.
FieldAccessor = Union[str, Callable[[Any], Union[str, Iterable[str], None]]]


def _field_texts(record: Any, accessor: FieldAccessor) -> Iterable[str]:
    value = getattr(record, accessor, None) if isinstance(accessor, str) else accessor(record)
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(v if isinstance(v, str) else str(v) for v in value if v is not None)
    return (str(value),)


def matches(record: Any, term: str, fields: Sequence[FieldAccessor]) -> bool:
    needle = (term or "").lower()
    if not needle:
        return True
    return any(needle in text.lower() for accessor in fields for text in _field_texts(record, accessor))


def filter_records(records: Iterable[R], term: str, fields: Sequence[FieldAccessor]) -> list[R]:
    """Case-insensitive substring filter; storage order is kept and an empty term keeps everything."""
    return [r for r in records if matches(r, term, fields)]
