from __future__ import annotations

from enum import Enum


class EmployeeRole(str, Enum):
    """Role shown on the employee directory."""

    ADMIN = "Admin"
    USER = "User"
    MANAGER = "Manager"


class SessionMode(str, Enum):
    IDLE = "idle"
    CREATING = "creating"
    EDITING = "editing"


class AttendanceMark(str, Enum):
    """Daily attendance mark used by the calendar history."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"


class LeaveType(str, Enum):
    SICK = "Sick Leave"
    VACATION = "Vacation"
    PERSONAL = "Personal Leave"


class RequestStatus(str, Enum):
    """Approval flow status (leave requests, supplier quotations)."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class BenefitType(str, Enum):
    HEALTH_INSURANCE = "Health Insurance"
    RETIREMENT_PLAN = "Retirement Plan"
    VACATION = "Vacation"
    STOCK_OPTIONS = "Stock Options"


class BenefitStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class SupplierCategory(str, Enum):
    LOCAL = "Local Supplier"
    INTERNATIONAL = "International Supplier"


class ProductCategory(str, Enum):
    ARABIC = "Arabic Cuisine"
    IRANI = "Irani Cuisine"
    SWEETS = "Sweets"


class OrderStatus(str, Enum):
    """Sales order delivery status."""

    IN_PROGRESS = "In Progress"
    DISPATCHED = "Dispatched"
    DELIVERED = "Delivered"


class KitchenOrderStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class MenuItem(str, Enum):
    PIZZA = "Pizza"
    BURGER = "Burger"
    PASTA = "Pasta"
    SALAD = "Salad"
