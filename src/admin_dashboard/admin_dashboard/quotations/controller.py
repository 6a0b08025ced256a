from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.http import current_workspace, json_endpoint, request_values
from ..container import Container
from ..records.serialization import session_to_dict, to_jsonable


def register(app: Flask, container: Container) -> None:
    def _page():
        return current_workspace(container).page("quotations")

    @app.route("/quotations/suppliers", methods=["POST"], endpoint="quotation_supplier_add")
    @json_endpoint
    def quotation_supplier_add():
        page = _page()
        page.add_supplier(request_values())
        return jsonify({"session": session_to_dict(page)})

    @app.route("/quotations/suppliers/<name>/delete", methods=["POST"], endpoint="quotation_supplier_delete")
    @json_endpoint
    def quotation_supplier_delete(name: str):
        page = _page()
        page.remove_supplier(name)
        return jsonify({"session": session_to_dict(page)})

    @app.route("/quotations/suppliers/<name>/quotation", methods=["POST"], endpoint="quotation_upload")
    @json_endpoint
    def quotation_upload(name: str):
        page = _page()
        page.attach_quotation(name, request.files.get("quotation"))
        return jsonify({"session": session_to_dict(page)})

    @app.route("/quotations/suppliers/<name>/status", methods=["POST"], endpoint="quotation_status")
    @json_endpoint
    def quotation_status(name: str):
        page = _page()
        page.set_supplier_status(name, request_values().get("status"))
        return jsonify({"session": session_to_dict(page)})

    @app.route("/quotations/<key>/suppliers", methods=["GET"], endpoint="quotation_suppliers")
    @json_endpoint
    def quotation_suppliers(key: str):
        suppliers = _page().suppliers_of(key, request.args.get("q", ""))
        return jsonify({"suppliers": to_jsonable(suppliers)})

    @app.route("/quotations/<key>/suppliers/<name>/quotation", methods=["GET"], endpoint="quotation_view")
    @json_endpoint
    def quotation_view(key: str, name: str):
        doc = _page().quotation(key, name)
        return send_file(io.BytesIO(doc.data), mimetype="application/pdf", download_name=doc.filename)
