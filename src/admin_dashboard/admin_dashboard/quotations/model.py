from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attachments.model import Attachment
from ..core.enums import RequestStatus


@dataclass(frozen=True)
class QuotationSupplier:
    """A supplier invited to quote on a requirement, identified by name."""

    name: str
    contact_no: str
    status: RequestStatus = RequestStatus.PENDING
    quotation: Optional[Attachment] = None


@dataclass(frozen=True)
class Requirement:
    key: str
    order_code: str
    requirement_id: str
    suppliers: tuple[QuotationSupplier, ...] = ()
