from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_workspace, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/employees/<key>/details", methods=["GET"], endpoint="employee_details")
    @json_endpoint
    def employee_details(key: str):
        page = current_workspace(container).page("employees")
        return jsonify({"title": "Employee Details", "details": page.details(key)})
