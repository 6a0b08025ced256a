from __future__ import annotations

from typing import Iterable

from ..attachments.model import Attachment
from ..attachments.reader import read_pdf
from ..core.constants import DEFAULT_MAX_UPLOAD_BYTES
from ..core.exceptions import RecordNotFoundError
from ..records.page import RecordPage
from .form import SupplierForm
from .model import Supplier


class SupplierPage(RecordPage[Supplier]):
    def __init__(self, records: Iterable[Supplier] = (), *, max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES):
        super().__init__("suppliers", SupplierForm(), records)
        self._max_upload_bytes = max_upload_bytes

    def attach_document(self, file) -> Attachment:
        attachment = self.read_upload(
            read_pdf,
            file,
            field_name="document",
            label="a supplier document",
            max_bytes=self._max_upload_bytes,
        )
        self.session.stage(document=attachment)
        return attachment

    def document(self, key: str) -> Attachment:
        supplier = self.get(key)
        if supplier.document is None:
            raise RecordNotFoundError("No PDF available to view.")
        return supplier.document
