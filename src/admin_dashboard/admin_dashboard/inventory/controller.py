from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import current_workspace, json_endpoint
from ..container import Container
from ..records.serialization import session_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/inventory/image", methods=["POST"], endpoint="inventory_image")
    @json_endpoint
    def inventory_image():
        page = current_workspace(container).page("inventory")
        page.attach_image(request.files.get("image"))
        return jsonify({"session": session_to_dict(page)})
