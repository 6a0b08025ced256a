"""Example: drive the order page and invoice renderer without Flask.

Controllers are thin; everything below is what the HTTP routes call.
"""

from pathlib import Path

from src.admin_dashboard.admin_dashboard.container import build_container


def main():
    container = build_container(seed_demo_data=True)
    _, workspace = container.views.open()

    orders = workspace.page("orders")
    orders.open_create()
    orders.add_line_item({"name": "Kunafa", "category": "Sweets", "quantity": 12})
    orders.add_line_item({"name": "Chicken Mandi", "category": "Arabic Cuisine", "quantity": 4})
    order = orders.confirm(
        {
            "order_valid_until": "2030-01-31",
            "supplier_name": "Gulf Foods",
            "supplier_category": "Local Supplier",
        }
    )

    out = Path(f"invoice-{order.order_code}.pdf")
    out.write_bytes(container.invoice_renderer.render(order))
    print(f"order {order.key} ({order.status.value}) -> {out}")

    employees = workspace.page("employees")
    print([e.full_name for e in employees.search("john")])


if __name__ == "__main__":
    main()
