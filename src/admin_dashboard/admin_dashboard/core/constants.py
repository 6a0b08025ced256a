"""Shared defaults.

Values the forms and pages fall back to when settings do not override them.
"""

DEFAULT_LEAVE_BALANCE = 20
DEFAULT_COMPANY_NAME = "Mandi Al Khalij Limited"
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024

ORDER_CODE_MIN = 100000
ORDER_CODE_MAX = 999999

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Per-client page views kept in memory
DEFAULT_VIEW_IDLE_SECONDS = 30 * 60
DEFAULT_MAX_OPEN_VIEWS = 500
