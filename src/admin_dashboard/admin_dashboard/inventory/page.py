from __future__ import annotations

from typing import Iterable

from ..attachments.reader import read_image
from ..core.constants import DEFAULT_MAX_UPLOAD_BYTES
from ..records.page import RecordPage
from .form import ProductForm
from .model import Product


class InventoryPage(RecordPage[Product]):
    def __init__(self, records: Iterable[Product] = (), *, max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES):
        super().__init__("inventory", ProductForm(), records)
        self._max_upload_bytes = max_upload_bytes

    def attach_image(self, file) -> str:
        attachment = self.read_upload(read_image, file, field_name="image", max_bytes=self._max_upload_bytes)
        url = attachment.data_url()
        self.session.stage(image=url)
        return url
