from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logger import get_logger, setup_logging
from .container import build_container
from .core.constants import (
    DEFAULT_COMPANY_NAME,
    DEFAULT_MAX_OPEN_VIEWS,
    DEFAULT_MAX_UPLOAD_BYTES,
    DEFAULT_VIEW_IDLE_SECONDS,
)
from .employees.controller import register as register_employees
from .inventory.controller import register as register_inventory
from .orders.controller import register as register_orders
from .quotations.controller import register as register_quotations
from .records.controller import register as register_records
from .suppliers.controller import register as register_suppliers

logger = get_logger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s debug=%s", settings_module, app.config["DEBUG"])

    container = build_container(
        company_name=getattr(settings, "COMPANY_NAME", DEFAULT_COMPANY_NAME),
        logo_path=getattr(settings, "INVOICE_LOGO_PATH", None),
        max_upload_bytes=int(getattr(settings, "MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES)),
        seed_demo_data=bool(getattr(settings, "SEED_DEMO_DATA", True)),
        view_idle_seconds=float(getattr(settings, "VIEW_IDLE_SECONDS", DEFAULT_VIEW_IDLE_SECONDS)),
        max_open_views=int(getattr(settings, "MAX_OPEN_VIEWS", DEFAULT_MAX_OPEN_VIEWS)),
    )
    app.extensions["admin_dashboard"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_inventory(app, container)
    register_suppliers(app, container)
    register_quotations(app, container)
    register_orders(app, container)
    register_records(app, container)

    return app
