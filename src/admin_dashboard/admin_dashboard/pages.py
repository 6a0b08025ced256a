"""Page factories: which page names exist and how each one is built on view entry."""

from __future__ import annotations

from typing import Any, Mapping

from .attendance.page import AttendancePage
from .demo_data import demo_attendance_details, demo_attendance_summaries, demo_employees
from .employees.page import DepartmentPage, EmployeePage
from .inventory.page import InventoryPage
from .leaves.form import LeaveForm
from .orders.page import KitchenOrderPage, SalesOrderPage
from .payroll.form import BenefitForm, PayrollForm
from .quotations.page import QuotationPage
from .records.page import RecordPage
from .suppliers.page import SupplierPage
from .views import PageFactory


def build_page_factories(*, seed_demo_data: bool, max_upload_bytes: int) -> Mapping[str, PageFactory]:
    def employees(ws) -> Any:
        return EmployeePage(demo_employees() if seed_demo_data else ())

    def attendance(ws) -> Any:
        if not seed_demo_data:
            return AttendancePage()
        return AttendancePage(demo_attendance_summaries(), demo_attendance_details())

    return {
        "employees": employees,
        "departments": lambda ws: DepartmentPage(),
        "job-titles": lambda ws: ws.page("departments").job_titles,
        "attendance": attendance,
        "leaves": lambda ws: RecordPage("leaves", LeaveForm()),
        "payroll": lambda ws: RecordPage("payroll", PayrollForm()),
        "benefits": lambda ws: RecordPage("benefits", BenefitForm()),
        "inventory": lambda ws: InventoryPage(max_upload_bytes=max_upload_bytes),
        "suppliers": lambda ws: SupplierPage(max_upload_bytes=max_upload_bytes),
        "quotations": lambda ws: QuotationPage(max_upload_bytes=max_upload_bytes),
        "orders": lambda ws: SalesOrderPage(),
        "kitchen-orders": lambda ws: KitchenOrderPage(),
    }


# Pages served by the generic CRUD routes (attendance is read-only).
CRUD_PAGES = (
    "employees",
    "departments",
    "job-titles",
    "leaves",
    "payroll",
    "benefits",
    "inventory",
    "suppliers",
    "quotations",
    "orders",
    "kitchen-orders",
)
