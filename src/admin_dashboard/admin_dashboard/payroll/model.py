from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import BenefitStatus, BenefitType


@dataclass(frozen=True)
class PayrollRecord:
    key: str
    employee_id: str
    employee_name: str
    hours_worked: float
    salary: float
    deductions: float
    net_pay: float


@dataclass(frozen=True)
class BenefitRecord:
    key: str
    employee_id: str
    employee_name: str
    benefits: tuple[BenefitType, ...]
    status: BenefitStatus
    enrollment_date: date
