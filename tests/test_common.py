from __future__ import annotations

from datetime import date

import pytest

from src.admin_dashboard.admin_dashboard.common.http import json_endpoint
from src.admin_dashboard.admin_dashboard.common.identifiers import random_code
from src.admin_dashboard.admin_dashboard.common.validators import (
    FormErrors,
    require_choices,
    require_date,
    require_non_negative,
)
from src.admin_dashboard.admin_dashboard.core.enums import MenuItem
from src.admin_dashboard.admin_dashboard.core.exceptions import ValidationError


def test_require_non_negative_variants():
    assert require_non_negative("0", "Price") == 0
    assert require_non_negative(3, "Qty", whole=True) == 3
    for bad in ("", None, "abc", "nan", True):
        with pytest.raises(ValidationError):
            require_non_negative(bad, "Price")


def test_require_date_accepts_date_or_iso_text():
    assert require_date(date(2026, 1, 2), "Date") == date(2026, 1, 2)
    assert require_date("2026-01-02", "Date") == date(2026, 1, 2)
    with pytest.raises(ValidationError):
        require_date("2026-13-02", "Date")


def test_require_choices_keeps_order_without_duplicates():
    assert require_choices("Salad, Pizza,Salad", MenuItem, "Menu") == (MenuItem.SALAD, MenuItem.PIZZA)


def test_form_errors_keep_first_message_per_field():
    errors = FormErrors()
    errors.add("name", "first")
    errors.add("name", "second")

    with pytest.raises(ValidationError) as exc:
        errors.raise_if_any()

    assert exc.value.errors == {"name": "first"}


def test_random_code_is_six_digits():
    assert all(len(random_code()) == 6 for _ in range(20))


def test_unexpected_errors_become_500(app):
    @app.route("/boom", endpoint="boom")
    @json_endpoint
    def boom():
        raise RuntimeError("kaboom")

    res = app.test_client().get("/boom")

    assert res.status_code == 500
    assert res.get_json() == {"error": "Internal error"}


def test_settings_module_follows_app_env(monkeypatch):
    from config import get_settings_module

    monkeypatch.delenv("SETTINGS_MODULE", raising=False)
    monkeypatch.setenv("APP_ENV", "Production")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "staging")
    assert get_settings_module() == "config.development"

    monkeypatch.setenv("SETTINGS_MODULE", "config.testing")
    assert get_settings_module() == "config.testing"
