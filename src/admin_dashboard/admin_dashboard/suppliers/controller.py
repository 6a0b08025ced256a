from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.http import current_workspace, json_endpoint
from ..container import Container
from ..records.serialization import session_to_dict


def register(app: Flask, container: Container) -> None:
    def _page():
        return current_workspace(container).page("suppliers")

    @app.route("/suppliers/document", methods=["POST"], endpoint="supplier_document_upload")
    @json_endpoint
    def supplier_document_upload():
        page = _page()
        page.attach_document(request.files.get("document"))
        return jsonify({"session": session_to_dict(page)})

    @app.route("/suppliers/<key>/document", methods=["GET"], endpoint="supplier_document")
    @json_endpoint
    def supplier_document(key: str):
        doc = _page().document(key)
        return send_file(io.BytesIO(doc.data), mimetype=doc.content_type, download_name=doc.filename)
