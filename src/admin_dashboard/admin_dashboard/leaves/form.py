from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_iso_date
from ..common.validators import FormErrors, require_choice, require_date, require_non_empty
from ..core.constants import DEFAULT_LEAVE_BALANCE
from ..core.enums import LeaveType, RequestStatus
from ..records.form import RecordForm
from ..records.store import RecordStore
from .model import LeaveRecord


class LeaveForm(RecordForm[LeaveRecord]):
    title = "Leave record"
    search_fields = ("employee_name",)

    def __init__(self, *, initial_balance: int = DEFAULT_LEAVE_BALANCE):
        self._initial_balance = initial_balance

    def defaults(self, store: RecordStore[LeaveRecord]) -> dict[str, Any]:
        return {"status": RequestStatus.PENDING.value}

    def to_values(self, record: LeaveRecord) -> dict[str, Any]:
        return {
            "employee_id": record.employee_id,
            "employee_name": record.employee_name,
            "leave_type": record.leave_type.value,
            "start_date": format_iso_date(record.start_date),
            "end_date": format_iso_date(record.end_date),
            "status": record.status.value,
        }

    def build(self, values: Mapping[str, Any], *, previous: Optional[LeaveRecord]) -> LeaveRecord:
        errors = FormErrors()
        employee_id = errors.check("employee_id", require_non_empty, values.get("employee_id"), "Employee ID")
        employee_name = errors.check("employee_name", require_non_empty, values.get("employee_name"), "Employee name")
        leave_type = errors.check("leave_type", require_choice, values.get("leave_type"), LeaveType, "Leave type")
        start_date = errors.check("start_date", require_date, values.get("start_date"), "Start date")
        end_date = errors.check("end_date", require_date, values.get("end_date"), "End date")
        status = errors.check("status", require_choice, values.get("status"), RequestStatus, "Status")
        if start_date and end_date and end_date < start_date:
            errors.add("end_date", "End date must be on or after the start date")
        errors.raise_if_any()

        return LeaveRecord(
            key=previous.key if previous else "",
            employee_id=employee_id,
            employee_name=employee_name,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            status=status,
            leave_balance=previous.leave_balance if previous else self._initial_balance,
        )
