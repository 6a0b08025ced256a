from __future__ import annotations

from typing import Any, Mapping, Optional

from ..attachments.model import Attachment
from ..common.validators import FormErrors, require_email, require_non_empty
from ..records.form import RecordForm
from .model import Supplier


class SupplierForm(RecordForm[Supplier]):
    title = "Supplier"
    search_fields = ("name",)
    staged_fields = ("document",)

    def to_values(self, record: Supplier) -> dict[str, Any]:
        return {
            "name": record.name,
            "email": record.email,
            "contact_number": record.contact_number,
            "supplied_item": record.supplied_item,
            "about": record.about,
            "document": record.document,
        }

    def build(self, values: Mapping[str, Any], *, previous: Optional[Supplier]) -> Supplier:
        errors = FormErrors()
        name = errors.check("name", require_non_empty, values.get("name"), "Supplier name")
        email = errors.check("email", require_email, values.get("email"), "Email")
        contact = errors.check("contact_number", require_non_empty, values.get("contact_number"), "Contact number")
        item = errors.check("supplied_item", require_non_empty, values.get("supplied_item"), "Supplied item")
        about = errors.check("about", require_non_empty, values.get("about"), "About supplier")
        document = values.get("document")
        if not isinstance(document, Attachment):
            errors.add("document", "Please upload a supplier document")
        errors.raise_if_any()

        return Supplier(
            key=previous.key if previous else "",
            name=name,
            email=email,
            contact_number=contact,
            supplied_item=item,
            about=about,
            document=document,
        )
