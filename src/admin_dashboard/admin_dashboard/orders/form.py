from __future__ import annotations

import random
from datetime import date
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import format_iso_date, today_local
from ..common.identifiers import random_code
from ..common.validators import (
    FormErrors,
    optional_text,
    require_choice,
    require_choices,
    require_date,
    require_non_empty,
    require_non_negative,
)
from ..core.enums import KitchenOrderStatus, MenuItem, OrderStatus, ProductCategory, SupplierCategory
from ..records.form import RecordForm
from ..records.store import RecordStore
from .model import KitchenOrder, LineItem, OrderSupplier, SalesOrder


class LineItemForm:
    """Nested "Add Product" dialog of the sales order form."""

    def build(self, values: Mapping[str, Any], *, key: str) -> LineItem:
        errors = FormErrors()
        name = errors.check("name", require_non_empty, values.get("name"), "Product name")
        category = errors.check("category", require_choice, values.get("category"), ProductCategory, "Category")
        quantity = errors.check("quantity", require_non_negative, values.get("quantity"), "Quantity", whole=True)
        errors.raise_if_any()
        return LineItem(key=key, name=name, category=category, quantity=quantity)


class SalesOrderForm(RecordForm[SalesOrder]):
    title = "Order"
    search_fields = (SalesOrder.product_names,)
    staged_fields = ("sno", "order_code", "products")

    def __init__(self, *, clock: Callable[[], date] = today_local, rng: Optional[random.Random] = None):
        self._clock = clock
        self._rng = rng

    def defaults(self, store: RecordStore[SalesOrder]) -> dict[str, Any]:
        return {
            "sno": int(store.peek_key()),
            "order_code": random_code(self._rng),
            "order_date": format_iso_date(self._clock()),
            "products": [],
        }

    def to_values(self, record: SalesOrder) -> dict[str, Any]:
        return {
            "sno": record.sno,
            "order_code": record.order_code,
            "order_date": format_iso_date(record.order_date),
            "order_valid_until": format_iso_date(record.order_valid_until),
            "supplier_name": record.supplier.name,
            "supplier_category": record.supplier.category.value,
            "products": list(record.products),
            "status": record.status.value,
        }

    def build(self, values: Mapping[str, Any], *, previous: Optional[SalesOrder]) -> SalesOrder:
        errors = FormErrors()
        order_code = errors.check("order_code", require_non_empty, values.get("order_code"), "Order code")
        order_date = errors.check("order_date", require_date, values.get("order_date"), "Order date")
        valid_until = errors.check("order_valid_until", require_date, values.get("order_valid_until"), "Validity date")
        category = errors.check(
            "supplier_category", require_choice, values.get("supplier_category"), SupplierCategory, "Supplier category"
        )
        if order_date and valid_until and valid_until < order_date:
            errors.add("order_valid_until", "Validity date must be on or after the order date")

        status = OrderStatus.IN_PROGRESS
        if previous is not None:
            status = previous.status
            if values.get("status"):
                status = errors.check("status", require_choice, values.get("status"), OrderStatus, "Status")
        errors.raise_if_any()

        return SalesOrder(
            key=previous.key if previous else "",
            sno=previous.sno if previous else int(values.get("sno") or 0),
            order_code=order_code,
            order_date=order_date,
            order_valid_until=valid_until,
            supplier=OrderSupplier(name=optional_text(values.get("supplier_name")), category=category),
            products=tuple(p for p in values.get("products") or () if isinstance(p, LineItem)),
            status=status,
        )


class KitchenOrderForm(RecordForm[KitchenOrder]):
    """Restaurant order; status is only editable after creation."""

    title = "Order"
    search_fields = ("order_code",)

    def to_values(self, record: KitchenOrder) -> dict[str, Any]:
        return {
            "order_code": record.order_code,
            "menu_items": [m.value for m in record.menu_items],
            "special_request": record.special_request,
            "status": record.status.value,
            "price": record.price,
        }

    def build(self, values: Mapping[str, Any], *, previous: Optional[KitchenOrder]) -> KitchenOrder:
        errors = FormErrors()
        order_code = errors.check("order_code", require_non_empty, values.get("order_code"), "Order code")
        menu_items = errors.check("menu_items", require_choices, values.get("menu_items"), MenuItem, "Menu items")
        price = errors.check("price", require_non_negative, values.get("price"), "Price")
        status = KitchenOrderStatus.PENDING
        if previous is not None:
            status = errors.check("status", require_choice, values.get("status"), KitchenOrderStatus, "Status")
        errors.raise_if_any()

        return KitchenOrder(
            key=previous.key if previous else "",
            order_code=order_code,
            menu_items=menu_items,
            special_request=optional_text(values.get("special_request")),
            status=status,
            price=price,
        )
