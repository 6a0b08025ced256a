from __future__ import annotations

from typing import Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` maps form field names to the message shown next to that field.
    """

    def __init__(self, message: str, errors: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        self.errors: dict[str, str] = dict(errors or {})


class AttachmentReadError(ValidationError):
    """Raised when an uploaded file cannot be read into memory."""


class RecordNotFoundError(DomainError):
    """Raised when an action targets a record key that is not in the store."""


class SessionStateError(DomainError):
    """Raised when confirm/cancel is requested while no edit session is open."""
