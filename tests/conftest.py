from __future__ import annotations

import io

import pytest
from werkzeug.datastructures import FileStorage

from src.admin_dashboard.admin_dashboard.main import create_app

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
PDF_BYTES = b"%PDF-1.4\n1 0 obj << >> endobj\ntrailer << >>\n%%EOF\n"


@pytest.fixture
def app():
    app = create_app("config.testing")
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def png_upload():
    def make(filename="dish.png", data=PNG_BYTES, content_type="image/png"):
        return FileStorage(stream=io.BytesIO(data), filename=filename, content_type=content_type)

    return make


@pytest.fixture
def pdf_upload():
    def make(filename="document.pdf", data=PDF_BYTES, content_type="application/pdf"):
        return FileStorage(stream=io.BytesIO(data), filename=filename, content_type=content_type)

    return make
