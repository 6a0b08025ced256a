from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.validators import FormErrors, require_choice, require_email, require_non_empty
from ..core.enums import EmployeeRole
from ..records.form import RecordForm
from ..records.store import RecordStore
from .model import Department, Employee, JobTitle


class EmployeeForm(RecordForm[Employee]):
    title = "Employee"
    search_fields = ("first_name", "last_name", "email", "key")
    staged_fields = ("key",)

    def defaults(self, store: RecordStore[Employee]) -> dict[str, Any]:
        # The Employee ID field is read-only in the form and shows the upcoming key.
        return {"key": store.peek_key(), "role": EmployeeRole.USER.value}

    def to_values(self, record: Employee) -> dict[str, Any]:
        return {
            "key": record.key,
            "first_name": record.first_name,
            "last_name": record.last_name,
            "email": record.email,
            "job_title": record.job_title,
            "department": record.department,
            "role": record.role.value,
        }

    def build(self, values: Mapping[str, Any], *, previous: Optional[Employee]) -> Employee:
        errors = FormErrors()
        first_name = errors.check("first_name", require_non_empty, values.get("first_name"), "First name")
        last_name = errors.check("last_name", require_non_empty, values.get("last_name"), "Last name")
        email = errors.check("email", require_email, values.get("email"), "Email")
        job_title = errors.check("job_title", require_non_empty, values.get("job_title"), "Job title")
        department = errors.check("department", require_non_empty, values.get("department"), "Department")
        role = errors.check("role", require_choice, values.get("role"), EmployeeRole, "Role")
        errors.raise_if_any()

        return Employee(
            key=previous.key if previous else "",
            first_name=first_name,
            last_name=last_name,
            email=email,
            job_title=job_title,
            department=department,
            role=role,
        )


class DepartmentForm(RecordForm[Department]):
    title = "Department"
    search_fields = ("name",)

    def to_values(self, record: Department) -> dict[str, Any]:
        return {"name": record.name}

    def build(self, values: Mapping[str, Any], *, previous: Optional[Department]) -> Department:
        errors = FormErrors()
        name = errors.check("name", require_non_empty, values.get("name"), "Department name")
        errors.raise_if_any()
        return Department(key=previous.key if previous else "", name=name)


class JobTitleForm(RecordForm[JobTitle]):
    title = "Job title"
    search_fields = ("name",)

    def to_values(self, record: JobTitle) -> dict[str, Any]:
        return {"name": record.name, "department_key": record.department_key}

    def build(self, values: Mapping[str, Any], *, previous: Optional[JobTitle]) -> JobTitle:
        errors = FormErrors()
        name = errors.check("name", require_non_empty, values.get("name"), "Job title")
        department_key = errors.check("department_key", require_non_empty, values.get("department_key"), "Department")
        errors.raise_if_any()
        return JobTitle(key=previous.key if previous else "", name=name, department_key=department_key)
