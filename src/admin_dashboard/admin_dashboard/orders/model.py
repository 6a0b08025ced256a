from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import KitchenOrderStatus, MenuItem, OrderStatus, ProductCategory, SupplierCategory


@dataclass(frozen=True)
class LineItem:
    key: str
    name: str
    category: ProductCategory
    quantity: int


@dataclass(frozen=True)
class OrderSupplier:
    name: str
    category: SupplierCategory


@dataclass(frozen=True)
class SalesOrder:
    """Purchase/sales order with its product lines; ``sno`` is the row number shown in the table."""

    key: str
    sno: int
    order_code: str
    order_date: date
    order_valid_until: date
    supplier: OrderSupplier
    products: tuple[LineItem, ...]
    status: OrderStatus

    def product_names(self) -> list[str]:
        return [p.name for p in self.products]


@dataclass(frozen=True)
class KitchenOrder:
    key: str
    order_code: str
    menu_items: tuple[MenuItem, ...]
    special_request: str
    status: KitchenOrderStatus
    price: float
