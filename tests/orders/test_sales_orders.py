from __future__ import annotations

import random
from datetime import date

import pytest

from src.admin_dashboard.admin_dashboard.core.enums import KitchenOrderStatus, MenuItem, OrderStatus, ProductCategory
from src.admin_dashboard.admin_dashboard.core.exceptions import ValidationError
from src.admin_dashboard.admin_dashboard.orders.page import KitchenOrderPage, SalesOrderPage

TODAY = date(2026, 10, 19)
ORDER = {"order_valid_until": "2026-10-31", "supplier_name": "Gulf Foods", "supplier_category": "Local Supplier"}


def open_orders():
    page = SalesOrderPage(clock=lambda: TODAY, rng=random.Random(1))
    page.open_create()
    return page


def test_new_order_defaults():
    page = open_orders()
    draft = page.session.draft

    assert draft["sno"] == 1
    assert draft["order_date"] == "2026-10-19"
    assert len(draft["order_code"]) == 6 and draft["order_code"].isdigit()
    assert draft["products"] == []


def test_line_items_get_unique_keys():
    page = open_orders()
    page.add_line_item({"name": "Kunafa", "category": "Sweets", "quantity": "12"})
    page.add_line_item({"name": "Mandi", "category": "Arabic Cuisine", "quantity": 3})

    assert page.remove_line_item("1") is True
    third = page.add_line_item({"name": "Kebab", "category": "Irani Cuisine", "quantity": 0})

    assert third.key == "3"
    assert [p.key for p in page.staged_products()] == ["2", "3"]
    assert page.remove_line_item("9") is False


def test_invalid_line_item_leaves_products_untouched():
    page = open_orders()

    with pytest.raises(ValidationError) as exc:
        page.add_line_item({"name": "", "category": "Sweets", "quantity": "-1"})

    assert set(exc.value.errors) == {"name", "quantity"}
    assert page.staged_products() == []


def test_confirmed_order_is_in_progress_with_products():
    page = open_orders()
    page.add_line_item({"name": "Kunafa", "category": "Sweets", "quantity": 12})

    order = page.confirm({**ORDER, "order_code": "000001", "products": []})

    assert order.key == "1"
    assert order.sno == 1
    assert order.status == OrderStatus.IN_PROGRESS
    assert order.order_code != "000001"
    assert order.order_date == TODAY
    assert order.products[0].category == ProductCategory.SWEETS
    assert order.supplier.name == "Gulf Foods"


def test_validity_date_cannot_precede_order_date():
    page = open_orders()

    with pytest.raises(ValidationError) as exc:
        page.confirm({**ORDER, "order_valid_until": "2026-10-01"})

    assert exc.value.errors == {"order_valid_until": "Validity date must be on or after the order date"}


def test_status_is_kept_on_edit_unless_changed():
    page = open_orders()
    order = page.confirm(ORDER)

    page.open_edit(order.key)
    same = page.confirm({"supplier_name": "Other"})
    assert same.status == OrderStatus.IN_PROGRESS
    assert same.order_code == order.order_code

    page.open_edit(order.key)
    shipped = page.confirm({"status": "Dispatched"})
    assert shipped.status == OrderStatus.DISPATCHED


def test_search_by_product_name_and_empty_term_shows_all():
    page = open_orders()
    page.add_line_item({"name": "Kunafa", "category": "Sweets", "quantity": 1})
    with_products = page.confirm(ORDER)
    page.open_create()
    without_products = page.confirm(ORDER)

    assert page.search("KUN") == [with_products]
    assert page.search("") == [with_products, without_products]


def test_kitchen_order_starts_pending_and_needs_status_on_edit():
    page = KitchenOrderPage()
    page.open_create()

    order = page.confirm(
        {"order_code": "K-1", "menu_items": ["Pizza", "Pasta", "Pizza"], "price": "18.5", "status": "Completed"}
    )

    assert order.status == KitchenOrderStatus.PENDING
    assert order.menu_items == (MenuItem.PIZZA, MenuItem.PASTA)

    page.open_edit(order.key)
    with pytest.raises(ValidationError) as exc:
        page.confirm({"status": ""})
    assert "status" in exc.value.errors

    done = page.confirm({"status": "Completed"})
    assert done.status == KitchenOrderStatus.COMPLETED


def test_kitchen_order_needs_menu_items():
    page = KitchenOrderPage()
    page.open_create()

    with pytest.raises(ValidationError) as exc:
        page.confirm({"order_code": "K-2", "menu_items": [], "price": "5"})

    assert set(exc.value.errors) == {"menu_items"}
