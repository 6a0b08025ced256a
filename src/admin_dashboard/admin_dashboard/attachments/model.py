from __future__ import annotations

import base64
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Attachment:
    """An uploaded file held in memory for the lifetime of the page view."""

    filename: str
    content_type: str
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)

    def data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"

    def describe(self) -> dict:
        return {"filename": self.filename, "content_type": self.content_type, "size": self.size}
