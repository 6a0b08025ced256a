from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import EmployeeRole


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee (plain data, no storage access)."""

    key: str
    first_name: str
    last_name: str
    email: str
    job_title: str
    department: str
    role: EmployeeRole

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class Department:
    key: str
    name: str


@dataclass(frozen=True)
class JobTitle:
    key: str
    name: str
    department_key: str
