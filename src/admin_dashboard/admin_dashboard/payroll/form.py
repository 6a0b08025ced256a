from __future__ import annotations

from datetime import date
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import today_local
from ..common.validators import FormErrors, require_choice, require_choices, require_non_empty, require_non_negative
from ..core.enums import BenefitStatus, BenefitType
from ..records.form import RecordForm
from .model import BenefitRecord, PayrollRecord


class PayrollForm(RecordForm[PayrollRecord]):
    """Pay slip: net pay is always recomputed as salary - deductions."""

    title = "Payroll record"
    search_fields = ("employee_name",)

    def to_values(self, record: PayrollRecord) -> dict[str, Any]:
        return {
            "employee_id": record.employee_id,
            "employee_name": record.employee_name,
            "hours_worked": record.hours_worked,
            "salary": record.salary,
            "deductions": record.deductions,
        }

    def build(self, values: Mapping[str, Any], *, previous: Optional[PayrollRecord]) -> PayrollRecord:
        errors = FormErrors()
        employee_id = errors.check("employee_id", require_non_empty, values.get("employee_id"), "Employee ID")
        employee_name = errors.check("employee_name", require_non_empty, values.get("employee_name"), "Employee name")
        hours = errors.check("hours_worked", require_non_negative, values.get("hours_worked"), "Hours worked")
        salary = errors.check("salary", require_non_negative, values.get("salary"), "Salary")
        deductions = errors.check("deductions", require_non_negative, values.get("deductions"), "Deductions")
        errors.raise_if_any()

        return PayrollRecord(
            key=previous.key if previous else "",
            employee_id=employee_id,
            employee_name=employee_name,
            hours_worked=hours,
            salary=salary,
            deductions=deductions,
            net_pay=round(salary - deductions, 2),
        )


class BenefitForm(RecordForm[BenefitRecord]):
    title = "Benefit record"
    search_fields = ("employee_name", "employee_id")

    def __init__(self, *, clock: Callable[[], date] = today_local):
        self._clock = clock

    def to_values(self, record: BenefitRecord) -> dict[str, Any]:
        return {
            "employee_id": record.employee_id,
            "employee_name": record.employee_name,
            "benefits": [b.value for b in record.benefits],
            "status": record.status.value,
        }

    def build(self, values: Mapping[str, Any], *, previous: Optional[BenefitRecord]) -> BenefitRecord:
        errors = FormErrors()
        employee_id = errors.check("employee_id", require_non_empty, values.get("employee_id"), "Employee ID")
        employee_name = errors.check("employee_name", require_non_empty, values.get("employee_name"), "Employee name")
        benefits = errors.check("benefits", require_choices, values.get("benefits"), BenefitType, "Benefit types")
        status = errors.check("status", require_choice, values.get("status"), BenefitStatus, "Status")
        errors.raise_if_any()

        return BenefitRecord(
            key=previous.key if previous else "",
            employee_id=employee_id,
            employee_name=employee_name,
            benefits=benefits,
            status=status,
            enrollment_date=previous.enrollment_date if previous else self._clock(),
        )
