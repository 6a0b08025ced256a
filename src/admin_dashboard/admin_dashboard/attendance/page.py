from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..core.constants import MONTHS
from ..core.enums import AttendanceMark
from ..core.exceptions import ValidationError
from ..records.store import RecordStore
from .model import AttendanceDetail, AttendanceSummary


class AttendancePage:
    """Read-only attendance overview: monthly totals plus a per-employee calendar."""

    name = "attendance"

    def __init__(
        self,
        summaries: Iterable[AttendanceSummary] = (),
        details: Iterable[AttendanceDetail] = (),
        *,
        month: str = MONTHS[0],
    ):
        self.summaries: RecordStore[AttendanceSummary] = RecordStore(summaries, name="attendance")
        self.details: RecordStore[AttendanceDetail] = RecordStore(details, name="attendance-history")
        self.month = self._check_month(month)

    @staticmethod
    def _check_month(month: Optional[str]) -> str:
        value = (month or "").strip().capitalize()
        if value not in MONTHS:
            raise ValidationError("Unknown month", {"month": f"Month must be one of: {', '.join(MONTHS)}"})
        return value

    def select_month(self, month: Optional[str]) -> list[AttendanceSummary]:
        self.month = self._check_month(month)
        return self.visible()

    def visible(self) -> list[AttendanceSummary]:
        return [s for s in self.summaries if s.month == self.month]

    def history(self, employee_key: str, *, year: Optional[int] = None, month: Optional[int] = None) -> list[AttendanceDetail]:
        rows = [d for d in self.details if d.employee_key == employee_key]
        if year is not None:
            rows = [d for d in rows if d.work_date.year == year]
        if month is not None:
            rows = [d for d in rows if d.work_date.month == month]
        return sorted(rows, key=lambda d: d.work_date)

    def day_badges(self, employee_key: str, day: date) -> list[dict]:
        """Calendar cell content: clock-in and clock-out, green when present."""

        for d in self.details:
            if d.employee_key == employee_key and d.work_date == day:
                badge = "success" if d.mark == AttendanceMark.PRESENT else "warning"
                return [{"type": badge, "content": d.clock_in}, {"type": badge, "content": d.clock_out}]
        return []
