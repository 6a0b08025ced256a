from __future__ import annotations

from functools import wraps
from typing import Any

from flask import current_app, jsonify, request, session

from ..core.exceptions import DomainError, RecordNotFoundError, SessionStateError, ValidationError
from .logger import get_logger

logger = get_logger(__name__)


def current_workspace(container):
    """Workspace of the calling client; the first request of a client opens one."""

    view_id, workspace = container.views.open(session.get("view_id"))
    session["view_id"] = view_id
    return workspace


def request_values() -> dict[str, Any]:
    """Submitted form values from a JSON body or an HTML form post."""

    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload

    values: dict[str, Any] = {}
    for key in request.form.keys():
        items = request.form.getlist(key)
        values[key] = items if len(items) > 1 else items[0]
    return values


def json_endpoint(view):
    """Map domain errors onto JSON responses.

    422 validation (with field errors), 404 missing record, 409 no open form,
    400 other business rule, 500 anything unexpected.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"error": str(e), "errors": e.errors}), 422
        except RecordNotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except SessionStateError as e:
            return jsonify({"error": str(e)}), 409
        except DomainError as e:
            return jsonify({"error": str(e)}), 400
        except Exception as e:
            logger.exception("unhandled error in %s", request.path)
            if bool(current_app.config.get("DEBUG", False)):
                return jsonify({"error": f"Internal error: {e}"}), 500
            return jsonify({"error": "Internal error"}), 500

    return wrapper
