from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.validators import FormErrors, require_non_empty, require_non_negative
from ..records.form import RecordForm
from .model import Product


class ProductForm(RecordForm[Product]):
    title = "Product"
    search_fields = ("name",)
    staged_fields = ("image",)

    def to_values(self, record: Product) -> dict[str, Any]:
        return {
            "name": record.name,
            "code": record.code,
            "type": record.type,
            "price": record.price,
            "quantity": record.quantity,
            "image": record.image,
        }

    def build(self, values: Mapping[str, Any], *, previous: Optional[Product]) -> Product:
        errors = FormErrors()
        name = errors.check("name", require_non_empty, values.get("name"), "Product name")
        code = errors.check("code", require_non_empty, values.get("code"), "Product code")
        type_ = errors.check("type", require_non_empty, values.get("type"), "Product type")
        price = errors.check("price", require_non_negative, values.get("price"), "Price")
        quantity = errors.check("quantity", require_non_negative, values.get("quantity"), "Quantity", whole=True)
        image = str(values.get("image") or "")
        if not image.startswith("data:image/"):
            errors.add("image", "Please upload a product image")
        errors.raise_if_any()

        return Product(
            key=previous.key if previous else "",
            name=name,
            code=code,
            type=type_,
            price=price,
            quantity=quantity,
            image=image,
        )
