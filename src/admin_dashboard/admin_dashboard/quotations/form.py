from __future__ import annotations

import random
from typing import Any, Mapping, Optional

from ..common.identifiers import random_code
from ..common.validators import FormErrors, require_non_empty
from ..records.filtering import filter_records
from ..records.form import RecordForm
from ..records.store import RecordStore
from .model import QuotationSupplier, Requirement


class QuotationSupplierForm:
    """Small nested form used by the "Add Supplier" dialog."""

    def build(self, values: Mapping[str, Any]) -> QuotationSupplier:
        errors = FormErrors()
        name = errors.check("name", require_non_empty, values.get("name"), "Supplier name")
        contact_no = errors.check("contact_no", require_non_empty, values.get("contact_no"), "Contact number")
        errors.raise_if_any()
        return QuotationSupplier(name=name, contact_no=contact_no)


def filter_suppliers(suppliers, term: str) -> list[QuotationSupplier]:
    return filter_records(suppliers, term, ("name",))


class RequirementForm(RecordForm[Requirement]):
    title = "Requirement"
    search_fields = ("order_code", "requirement_id")
    staged_fields = ("suppliers",)

    def __init__(self, *, rng: Optional[random.Random] = None):
        self._rng = rng

    def defaults(self, store: RecordStore[Requirement]) -> dict[str, Any]:
        return {"requirement_id": random_code(self._rng), "suppliers": []}

    def to_values(self, record: Requirement) -> dict[str, Any]:
        return {
            "order_code": record.order_code,
            "requirement_id": record.requirement_id,
            "suppliers": list(record.suppliers),
        }

    def build(self, values: Mapping[str, Any], *, previous: Optional[Requirement]) -> Requirement:
        errors = FormErrors()
        order_code = errors.check("order_code", require_non_empty, values.get("order_code"), "Order code")
        requirement_id = errors.check("requirement_id", require_non_empty, values.get("requirement_id"), "Requirement ID")
        suppliers = tuple(s for s in values.get("suppliers") or () if isinstance(s, QuotationSupplier))
        errors.raise_if_any()

        return Requirement(
            key=previous.key if previous else "",
            order_code=order_code,
            requirement_id=requirement_id,
            suppliers=suppliers,
        )
