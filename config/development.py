import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Name printed in the invoice footer
COMPANY_NAME = os.getenv("COMPANY_NAME", "Mandi Al Khalij Limited")
# Optional PNG drawn in the invoice header
INVOICE_LOGO_PATH = os.getenv("INVOICE_LOGO_PATH") or None

MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

# Start the employee and attendance pages with the sample rows
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

# Client views idle this long are dropped with their pages
VIEW_IDLE_SECONDS = int(os.getenv("VIEW_IDLE_SECONDS", str(30 * 60)))
MAX_OPEN_VIEWS = int(os.getenv("MAX_OPEN_VIEWS", "500"))
