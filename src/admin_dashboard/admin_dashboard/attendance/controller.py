from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import current_workspace, json_endpoint
from ..common.validators import require_date
from ..container import Container
from ..core.exceptions import ValidationError
from ..records.serialization import to_jsonable


def register(app: Flask, container: Container) -> None:
    def _page():
        return current_workspace(container).page("attendance")

    def _int_arg(name: str):
        value = request.args.get(name)
        if not value:
            return None
        if not value.isdigit():
            raise ValidationError(f"{name} must be a number", {name: f"{name} must be a number"})
        return int(value)

    @app.route("/attendance", methods=["GET"], endpoint="attendance_overview")
    @json_endpoint
    def attendance_overview():
        page = _page()
        if request.args.get("month"):
            page.select_month(request.args["month"])
        return jsonify({"month": page.month, "records": to_jsonable(page.visible())})

    @app.route("/attendance/<employee_key>/history", methods=["GET"], endpoint="attendance_history")
    @json_endpoint
    def attendance_history(employee_key: str):
        rows = _page().history(employee_key, year=_int_arg("year"), month=_int_arg("month"))
        return jsonify({"employee_key": employee_key, "days": to_jsonable(rows)})

    @app.route("/attendance/<employee_key>/calendar/<day>", methods=["GET"], endpoint="attendance_calendar_cell")
    @json_endpoint
    def attendance_calendar_cell(employee_key: str, day: str):
        work_date = require_date(day, "Date")
        return jsonify({"date": day, "badges": _page().day_badges(employee_key, work_date)})
