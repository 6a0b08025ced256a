"""Demo records shown when SEED_DEMO_DATA is enabled."""

from __future__ import annotations

from datetime import date

from .attendance.model import AttendanceDetail, AttendanceSummary
from .core.enums import AttendanceMark, EmployeeRole
from .employees.model import Employee


def demo_employees() -> list[Employee]:
    return [
        Employee(
            key="1",
            first_name="John",
            last_name="Doe",
            email="john.doe@example.com",
            job_title="Software Engineer",
            department="Engineering",
            role=EmployeeRole.USER,
        )
    ]


def demo_attendance_summaries() -> list[AttendanceSummary]:
    return [
        AttendanceSummary(
            key="1",
            employee_key="1",
            employee_name="John Doe",
            month="January",
            total_late=2,
            total_absent=1,
            total_present=27,
        )
    ]


def demo_attendance_details() -> list[AttendanceDetail]:
    return [
        AttendanceDetail(
            key="1",
            employee_key="1",
            work_date=date(2024, 8, 1),
            clock_in="09:00 AM",
            clock_out="05:00 PM",
            mark=AttendanceMark.PRESENT,
        )
    ]
