from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import (
    DEFAULT_COMPANY_NAME,
    DEFAULT_MAX_OPEN_VIEWS,
    DEFAULT_MAX_UPLOAD_BYTES,
    DEFAULT_VIEW_IDLE_SECONDS,
)
from .documents.invoice import InvoiceRenderer
from .pages import build_page_factories
from .views import ViewRegistry


@dataclass(frozen=True)
class Container:
    views: ViewRegistry
    invoice_renderer: InvoiceRenderer
    max_upload_bytes: int


def build_container(
    *,
    company_name: str = DEFAULT_COMPANY_NAME,
    logo_path: Optional[str] = None,
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    seed_demo_data: bool = True,
    view_idle_seconds: float = DEFAULT_VIEW_IDLE_SECONDS,
    max_open_views: int = DEFAULT_MAX_OPEN_VIEWS,
) -> Container:
    factories = build_page_factories(seed_demo_data=seed_demo_data, max_upload_bytes=int(max_upload_bytes))
    return Container(
        views=ViewRegistry(factories, idle_seconds=float(view_idle_seconds), max_views=int(max_open_views)),
        invoice_renderer=InvoiceRenderer(company_name=company_name, logo_path=logo_path),
        max_upload_bytes=int(max_upload_bytes),
    )
