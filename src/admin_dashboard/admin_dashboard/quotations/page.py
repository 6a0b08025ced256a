from __future__ import annotations

import random
from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional

from ..attachments.model import Attachment
from ..attachments.reader import read_pdf
from ..common.validators import FormErrors, require_choice
from ..core.constants import DEFAULT_MAX_UPLOAD_BYTES
from ..core.enums import RequestStatus
from ..core.exceptions import RecordNotFoundError, ValidationError
from ..records.page import RecordPage
from .form import QuotationSupplierForm, RequirementForm, filter_suppliers
from .model import QuotationSupplier, Requirement


class QuotationPage(RecordPage[Requirement]):
    """Supplier quotations per requirement.

    The supplier list of the requirement being edited lives in the session
    draft until the requirement is confirmed.
    """

    def __init__(
        self,
        records: Iterable[Requirement] = (),
        *,
        rng: Optional[random.Random] = None,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    ):
        super().__init__("quotations", RequirementForm(rng=rng), records)
        self._supplier_form = QuotationSupplierForm()
        self._max_upload_bytes = max_upload_bytes

    def _staged(self) -> list[QuotationSupplier]:
        self.session.require_open()
        return list(self.session.draft.get("suppliers") or [])

    def _find(self, suppliers: list[QuotationSupplier], name: str) -> int:
        for i, s in enumerate(suppliers):
            if s.name == name:
                return i
        raise RecordNotFoundError(f"Supplier {name} is not on this requirement")

    def add_supplier(self, values: Mapping[str, Any]) -> QuotationSupplier:
        suppliers = self._staged()
        supplier = self._supplier_form.build(values)
        if any(s.name == supplier.name for s in suppliers):
            raise ValidationError("Duplicate supplier", {"name": "This supplier is already on the requirement"})
        self.session.stage(suppliers=suppliers + [supplier])
        return supplier

    def remove_supplier(self, name: str) -> None:
        suppliers = self._staged()
        self.session.stage(suppliers=[s for s in suppliers if s.name != name])

    def attach_quotation(self, name: str, file) -> QuotationSupplier:
        suppliers = self._staged()
        i = self._find(suppliers, name)
        attachment = self.read_upload(
            read_pdf,
            file,
            field_name="quotation",
            label="a quotation",
            max_bytes=self._max_upload_bytes,
        )
        suppliers[i] = replace(suppliers[i], quotation=attachment, status=RequestStatus.PENDING)
        self.session.stage(suppliers=suppliers)
        return suppliers[i]

    def set_supplier_status(self, name: str, status: Any) -> QuotationSupplier:
        suppliers = self._staged()
        i = self._find(suppliers, name)
        errors = FormErrors()
        if suppliers[i].quotation is None:
            errors.add("status", "Upload a quotation before changing its status")
        choice = errors.check("status", require_choice, status, RequestStatus, "Status")
        try:
            errors.raise_if_any()
        except ValidationError as e:
            self.session.fail({**self.session.errors, **e.errors})
            raise
        suppliers[i] = replace(suppliers[i], status=choice)
        self.session.stage(suppliers=suppliers)
        return suppliers[i]

    def suppliers_of(self, key: str, term: str = "") -> list[QuotationSupplier]:
        return filter_suppliers(self.get(key).suppliers, term)

    def quotation(self, key: str, name: str) -> Attachment:
        suppliers = list(self.get(key).suppliers)
        supplier = suppliers[self._find(suppliers, name)]
        if supplier.quotation is None:
            raise RecordNotFoundError("No File")
        return supplier.quotation
