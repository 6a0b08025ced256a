from __future__ import annotations

import pytest

from src.admin_dashboard.admin_dashboard.core.exceptions import AttachmentReadError, SessionStateError, ValidationError
from src.admin_dashboard.admin_dashboard.inventory.page import InventoryPage

PRODUCT = {"name": "Saffron", "code": "SF-01", "type": "Spice", "price": "12.5", "quantity": "40"}


def test_product_requires_uploaded_image():
    page = InventoryPage()
    page.open_create()

    with pytest.raises(ValidationError) as exc:
        page.confirm({**PRODUCT, "image": "data:image/png;base64,AAAA"})

    assert exc.value.errors == {"image": "Please upload a product image"}


def test_uploaded_image_is_staged_as_data_url(png_upload):
    page = InventoryPage()
    page.open_create()

    url = page.attach_image(png_upload())
    product = page.confirm(PRODUCT)

    assert url.startswith("data:image/png;base64,")
    assert product.image == url
    assert product.quantity == 40
    assert product.price == 12.5


def test_upload_clears_previous_image_error(png_upload):
    page = InventoryPage()
    page.open_create()
    with pytest.raises(ValidationError):
        page.confirm(PRODUCT)
    assert "image" in page.session.errors

    page.attach_image(png_upload())

    assert "image" not in page.session.errors


def test_wrong_file_type_is_a_field_error(png_upload):
    page = InventoryPage()
    page.open_create()
    page.session.stage(name="Saffron")

    with pytest.raises(AttachmentReadError):
        page.attach_image(png_upload(filename="notes.txt", data=b"hello", content_type="text/plain"))

    assert "image" in page.session.errors
    assert page.session.is_open
    assert page.session.draft["name"] == "Saffron"


def test_oversize_and_empty_images(png_upload):
    page = InventoryPage(max_upload_bytes=16)
    page.open_create()

    with pytest.raises(AttachmentReadError) as exc:
        page.attach_image(png_upload())
    assert "larger than" in exc.value.errors["image"]

    with pytest.raises(AttachmentReadError) as exc:
        page.attach_image(png_upload(data=b""))
    assert "empty" in exc.value.errors["image"]


def test_missing_upload(png_upload):
    page = InventoryPage()
    page.open_create()

    with pytest.raises(AttachmentReadError) as exc:
        page.attach_image(None)

    assert exc.value.errors == {"image": "Please upload a product image"}


def test_upload_needs_open_form(png_upload):
    with pytest.raises(SessionStateError):
        InventoryPage().attach_image(png_upload())


def test_fractional_quantity_is_rejected(png_upload):
    page = InventoryPage()
    page.open_create()
    page.attach_image(png_upload())

    with pytest.raises(ValidationError) as exc:
        page.confirm({**PRODUCT, "quantity": "2.5"})

    assert exc.value.errors == {"quantity": "Quantity must be a whole number"}
