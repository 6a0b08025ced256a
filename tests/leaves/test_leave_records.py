from __future__ import annotations

from datetime import date

import pytest

from src.admin_dashboard.admin_dashboard.core.enums import LeaveType, RequestStatus
from src.admin_dashboard.admin_dashboard.core.exceptions import ValidationError
from src.admin_dashboard.admin_dashboard.leaves.form import LeaveForm
from src.admin_dashboard.admin_dashboard.records.page import RecordPage

REQUEST = {
    "employee_id": "1",
    "employee_name": "John Doe",
    "leave_type": "Vacation",
    "start_date": "2026-07-01",
    "end_date": "2026-07-10",
}


def make_page():
    return RecordPage("leaves", LeaveForm())


def test_new_leave_is_pending_with_default_balance():
    page = make_page()

    assert page.open_create() == {"status": "Pending"}
    leave = page.confirm(REQUEST)

    assert leave.key == "1"
    assert leave.status == RequestStatus.PENDING
    assert leave.leave_type == LeaveType.VACATION
    assert leave.start_date == date(2026, 7, 1)
    assert leave.leave_balance == 20


def test_balance_survives_an_edit():
    page = RecordPage("leaves", LeaveForm(initial_balance=12))
    page.open_create()
    leave = page.confirm(REQUEST)

    page.open_edit(leave.key)
    approved = page.confirm({"status": "Approved"})

    assert approved.status == RequestStatus.APPROVED
    assert approved.leave_balance == 12


def test_end_date_before_start_date_is_rejected():
    page = make_page()
    page.open_create()

    with pytest.raises(ValidationError) as exc:
        page.confirm({**REQUEST, "end_date": "2026-06-30"})

    assert exc.value.errors == {"end_date": "End date must be on or after the start date"}


def test_bad_date_and_type():
    page = make_page()
    page.open_create()

    with pytest.raises(ValidationError) as exc:
        page.confirm({**REQUEST, "start_date": "01/07/2026", "leave_type": "Holiday"})

    assert set(exc.value.errors) == {"start_date", "leave_type"}


def test_search_by_employee_name():
    page = make_page()
    page.open_create()
    page.confirm(REQUEST)
    page.open_create()
    page.confirm({**REQUEST, "employee_id": "2", "employee_name": "Jane Smith"})

    assert [leave.employee_name for leave in page.search("jane")] == ["Jane Smith"]
