from __future__ import annotations

from datetime import date, datetime

ISO_DATE = "%Y-%m-%d"


def parse_iso_date(value: str) -> date:
    """'2026-10-19' -> date(2026, 10, 19); ValueError on anything else."""
    return datetime.strptime(value.strip(), ISO_DATE).date()


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE)


def today_local() -> date:
    # Forms take a clock callable defaulting to this.
    return date.today()
