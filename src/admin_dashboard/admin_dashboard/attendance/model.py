from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceMark


@dataclass(frozen=True)
class AttendanceSummary:
    """Monthly totals for one employee."""

    key: str
    employee_key: str
    employee_name: str
    month: str
    total_late: int
    total_absent: int
    total_present: int


@dataclass(frozen=True)
class AttendanceDetail:
    """One calendar day of one employee's attendance history."""

    key: str
    employee_key: str
    work_date: date
    clock_in: str
    clock_out: str
    mark: AttendanceMark
