from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from ..core.enums import SessionMode
from ..core.exceptions import SessionStateError


@dataclass(frozen=True)
class Idle:
    mode: SessionMode = SessionMode.IDLE


@dataclass(frozen=True)
class Creating:
    mode: SessionMode = SessionMode.CREATING


@dataclass(frozen=True)
class Editing:
    key: str
    mode: SessionMode = SessionMode.EDITING


SessionState = Union[Idle, Creating, Editing]


@dataclass
class EditSession:
    """Create/update in progress on one page: ``Idle | Creating | Editing(key)``.

    ``draft`` holds the working field values (prefilled on open, updated on
    every confirm attempt and by staged uploads/line items); ``errors`` holds
    the field messages of the last failed confirm.
    """

    state: SessionState = field(default_factory=Idle)
    draft: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def mode(self) -> SessionMode:
        return self.state.mode

    @property
    def is_open(self) -> bool:
        return not isinstance(self.state, Idle)

    @property
    def target_key(self) -> Optional[str]:
        return self.state.key if isinstance(self.state, Editing) else None

    def begin_create(self, defaults: Mapping[str, Any]) -> None:
        self.state = Creating()
        self.draft = dict(defaults)
        self.errors = {}

    def begin_edit(self, key: str, values: Mapping[str, Any]) -> None:
        self.state = Editing(key=key)
        self.draft = dict(values)
        self.errors = {}

    def require_open(self) -> SessionState:
        if not self.is_open:
            raise SessionStateError("No add/edit form is open")
        return self.state

    def stage(self, **values: Any) -> None:
        self.require_open()
        self.draft.update(values)
        for name in values:
            self.errors.pop(name, None)

    def fail(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)

    def close(self) -> None:
        self.state = Idle()
        self.draft = {}
        self.errors = {}
