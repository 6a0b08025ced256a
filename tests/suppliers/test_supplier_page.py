from __future__ import annotations

import pytest

from src.admin_dashboard.admin_dashboard.core.exceptions import AttachmentReadError, RecordNotFoundError, ValidationError
from src.admin_dashboard.admin_dashboard.suppliers.model import Supplier
from src.admin_dashboard.admin_dashboard.suppliers.page import SupplierPage

SUPPLIER = {
    "name": "Gulf Foods",
    "email": "sales@gulffoods.example",
    "contact_number": "+971 4 000 0000",
    "supplied_item": "Rice",
    "about": "Basmati rice importer",
}


def test_supplier_requires_document():
    page = SupplierPage()
    page.open_create()

    with pytest.raises(ValidationError) as exc:
        page.confirm(SUPPLIER)

    assert exc.value.errors == {"document": "Please upload a supplier document"}


def test_document_is_kept_with_supplier(pdf_upload):
    page = SupplierPage()
    page.open_create()
    page.attach_document(pdf_upload(filename="price list.pdf"))

    supplier = page.confirm(SUPPLIER)
    document = page.document(supplier.key)

    assert document.filename == "price_list.pdf"
    assert document.content_type == "application/pdf"
    assert document.data.startswith(b"%PDF")


def test_edit_keeps_existing_document(pdf_upload):
    page = SupplierPage()
    page.open_create()
    page.attach_document(pdf_upload())
    supplier = page.confirm(SUPPLIER)

    page.open_edit(supplier.key)
    updated = page.confirm({"supplied_item": "Dates"})

    assert updated.supplied_item == "Dates"
    assert updated.document == supplier.document


def test_non_pdf_upload_is_rejected(pdf_upload):
    page = SupplierPage()
    page.open_create()

    with pytest.raises(AttachmentReadError) as exc:
        page.attach_document(pdf_upload(data=b"GIF89a"))

    assert exc.value.errors == {"document": "A supplier document is not a valid PDF file"}
    assert page.session.errors == exc.value.errors


def test_supplier_without_document_has_nothing_to_view():
    page = SupplierPage([Supplier("1", "Old Co", "old@example.com", "1", "Salt", "Legacy")])

    with pytest.raises(RecordNotFoundError) as exc:
        page.document("1")

    assert str(exc.value) == "No PDF available to view."
