from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from ..core.exceptions import ValidationError
from ..records.page import RecordPage
from .form import DepartmentForm, EmployeeForm, JobTitleForm
from .model import Department, Employee, JobTitle


class EmployeePage(RecordPage[Employee]):
    def __init__(self, records: Iterable[Employee] = ()):
        super().__init__("employees", EmployeeForm(), records)

    def details(self, key: str) -> dict[str, Any]:
        """Read-only detail card."""
        e = self.get(key)
        return {
            "Employee ID": e.key,
            "Name": e.full_name,
            "Email": e.email,
            "Job Title": e.job_title,
            "Department": e.department,
            "Role": e.role.value,
        }


class JobTitlePage(RecordPage[JobTitle]):
    """Job titles listed under the departments screen; each must point at an existing department."""

    def __init__(self, departments: DepartmentPage, records: Iterable[JobTitle] = ()):
        super().__init__("job-titles", JobTitleForm(), records)
        self._departments = departments

    def department_name(self, job: JobTitle) -> str:
        dept = self._departments.store.get(job.department_key)
        return dept.name if dept else "N/A"

    def row(self, record: JobTitle) -> dict[str, Any]:
        return {**super().row(record), "department_name": self.department_name(record)}

    def _before_confirm(self, values: Mapping[str, Any], previous: Optional[JobTitle]) -> None:
        key = str(values.get("department_key") or "").strip()
        if key and self._departments.store.get(key) is None:
            raise ValidationError("Unknown department", {"department_key": "Please select a department"})

    def on_exit(self) -> None:
        self._departments.reset_job_titles()


class DepartmentPage(RecordPage[Department]):
    def __init__(self, records: Iterable[Department] = (), job_titles: Iterable[JobTitle] = ()):
        super().__init__("departments", DepartmentForm(), records)
        self.job_titles = JobTitlePage(self, job_titles)

    def _after_remove(self, record: Department) -> None:
        self.job_titles.store.remove_where(lambda job: job.department_key == record.key)

    def reset_job_titles(self) -> None:
        """Drop the job titles page; the next entry starts empty."""
        self.job_titles = JobTitlePage(self)
