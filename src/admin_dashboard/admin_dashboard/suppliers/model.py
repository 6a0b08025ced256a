from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attachments.model import Attachment


@dataclass(frozen=True)
class Supplier:
    key: str
    name: str
    email: str
    contact_number: str
    supplied_item: str
    about: str
    document: Optional[Attachment] = None
