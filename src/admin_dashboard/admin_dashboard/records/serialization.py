from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date
from enum import Enum
from typing import Any, Mapping

from ..common.datetime_utils import format_iso_date


def to_jsonable(value: Any) -> Any:
    """Turn records, drafts and their nested values into JSON-ready data.

    Objects exposing ``describe()`` (attachments) are reduced to their metadata.
    """

    if hasattr(value, "describe") and callable(value.describe):
        return value.describe()
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return format_iso_date(value)
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, bytes):
        return None
    return value


def session_to_dict(page) -> dict:
    session = page.session
    return {
        "mode": session.mode.value,
        "key": session.target_key,
        "draft": to_jsonable(session.draft),
        "errors": dict(session.errors),
    }
