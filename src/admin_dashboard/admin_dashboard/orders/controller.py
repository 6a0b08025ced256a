from __future__ import annotations

import io

from flask import Flask, jsonify, send_file

from ..common.http import current_workspace, json_endpoint, request_values
from ..container import Container
from ..records.serialization import session_to_dict


def register(app: Flask, container: Container) -> None:
    def _page():
        return current_workspace(container).page("orders")

    @app.route("/orders/products", methods=["POST"], endpoint="order_product_add")
    @json_endpoint
    def order_product_add():
        page = _page()
        page.add_line_item(request_values())
        return jsonify({"session": session_to_dict(page)})

    @app.route("/orders/products/<key>/delete", methods=["POST"], endpoint="order_product_delete")
    @json_endpoint
    def order_product_delete(key: str):
        page = _page()
        removed = page.remove_line_item(key)
        return jsonify({"removed": removed, "session": session_to_dict(page)})

    @app.route("/orders/<key>/invoice", methods=["GET"], endpoint="order_invoice")
    @json_endpoint
    def order_invoice(key: str):
        order = _page().get(key)
        pdf = container.invoice_renderer.render(order)
        return send_file(
            io.BytesIO(pdf),
            mimetype="application/pdf",
            download_name=f"invoice-{order.order_code}.pdf",
        )
