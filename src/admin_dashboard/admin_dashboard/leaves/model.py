from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import LeaveType, RequestStatus


@dataclass(frozen=True)
class LeaveRecord:
    key: str
    employee_id: str
    employee_name: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    status: RequestStatus
    leave_balance: int
