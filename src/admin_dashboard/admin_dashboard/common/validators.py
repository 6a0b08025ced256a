from __future__ import annotations

import re
from datetime import date
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

E = TypeVar("E", bound=Enum)
T = TypeVar("T")

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def require_email(value: Any, field_name: str) -> str:
    email = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(email):
        raise ValidationError(f"{field_name} is not a valid email")
    return email


def require_non_negative(value: Any, field_name: str, *, whole: bool = False) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if number != number or number in (float("inf"), float("-inf")):
        raise ValidationError(f"{field_name} must be a number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    if whole:
        if not number.is_integer():
            raise ValidationError(f"{field_name} must be a whole number")
        return int(number)
    return number


def require_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def require_choice(value: Any, choices: Type[E], field_name: str) -> E:
    if isinstance(value, choices):
        return value
    text = require_non_empty(value, field_name)
    try:
        return choices(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be one of: {', '.join(c.value for c in choices)}")


def require_choices(values: Any, choices: Type[E], field_name: str) -> tuple[E, ...]:
    """Multi-select: accepts a list or a comma separated string, keeps order, drops duplicates."""

    if isinstance(values, str):
        values = [v for v in values.split(",") if v.strip()]
    items: list[E] = []
    for v in values or ():
        choice = require_choice(v, choices, field_name)
        if choice not in items:
            items.append(choice)
    if not items:
        raise ValidationError(f"{field_name} is required")
    return tuple(items)


class FormErrors:
    """Collects one message per field so a form reports every problem at once."""

    def __init__(self) -> None:
        self._errors: dict[str, str] = {}

    def check(self, field: str, fn: Callable[..., T], *args: Any, **kwargs: Any) -> Optional[T]:
        try:
            return fn(*args, **kwargs)
        except ValidationError as e:
            self._errors.setdefault(field, str(e))
            return None

    def add(self, field: str, message: str) -> None:
        self._errors.setdefault(field, message)

    def extend(self, errors: Iterable[tuple[str, str]]) -> None:
        for field, message in errors:
            self.add(field, message)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def raise_if_any(self) -> None:
        if self._errors:
            raise ValidationError("Please correct the highlighted fields", self._errors)
