from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.http import current_workspace, json_endpoint, request_values
from ..container import Container
from ..pages import CRUD_PAGES
from .serialization import session_to_dict


def register(app: Flask, container: Container) -> None:
    """Generic table/modal routes shared by every CRUD page."""

    pages = "<any({}):page_name>".format(", ".join(f"'{p}'" for p in CRUD_PAGES))

    def _page(page_name: str):
        return current_workspace(container).page(page_name)

    def _listing(page) -> dict:
        return {
            "page": page.name,
            "search": page.search_term,
            "records": [page.row(r) for r in page.visible()],
            "total": len(page.store),
            "session": session_to_dict(page),
        }

    @app.route("/pages", methods=["GET"], endpoint="pages_index")
    def pages_index():
        return jsonify({"pages": container.views.page_names})

    @app.route("/views/close", methods=["POST"], endpoint="views_close")
    def views_close():
        view_id = session.pop("view_id", None)
        closed = container.views.close(view_id) if view_id else False
        return jsonify({"closed": closed})

    @app.route(f"/{pages}", methods=["GET"], endpoint="records_list")
    @json_endpoint
    def records_list(page_name: str):
        page = _page(page_name)
        if "q" in request.args:
            page.search(request.args.get("q"))
        return jsonify(_listing(page))

    @app.route(f"/{pages}", methods=["DELETE"], endpoint="records_exit")
    @json_endpoint
    def records_exit(page_name: str):
        exited = current_workspace(container).exit(page_name)
        return jsonify({"exited": exited})

    @app.route(f"/{pages}/<key>", methods=["GET"], endpoint="records_get")
    @json_endpoint
    def records_get(page_name: str, key: str):
        page = _page(page_name)
        return jsonify({"record": page.row(page.get(key))})

    @app.route(f"/{pages}/add", methods=["POST"], endpoint="records_add")
    @json_endpoint
    def records_add(page_name: str):
        page = _page(page_name)
        page.open_create()
        return jsonify({"session": session_to_dict(page)})

    @app.route(f"/{pages}/<key>/edit", methods=["POST"], endpoint="records_edit")
    @json_endpoint
    def records_edit(page_name: str, key: str):
        page = _page(page_name)
        page.open_edit(key)
        return jsonify({"session": session_to_dict(page)})

    @app.route(f"/{pages}/save", methods=["POST"], endpoint="records_save")
    @json_endpoint
    def records_save(page_name: str):
        page = _page(page_name)
        creating = page.session.target_key is None
        record = page.confirm(request_values())
        return jsonify({"record": page.row(record), "session": session_to_dict(page)}), (201 if creating else 200)

    @app.route(f"/{pages}/cancel", methods=["POST"], endpoint="records_cancel")
    @json_endpoint
    def records_cancel(page_name: str):
        page = _page(page_name)
        page.cancel()
        return jsonify({"session": session_to_dict(page)})

    @app.route(f"/{pages}/<key>/delete", methods=["POST"], endpoint="records_delete")
    @json_endpoint
    def records_delete(page_name: str, key: str):
        page = _page(page_name)
        return jsonify({"deleted": page.delete(key)})
