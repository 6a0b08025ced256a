import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

COMPANY_NAME = os.getenv("COMPANY_NAME", "Mandi Al Khalij Limited")
INVOICE_LOGO_PATH = os.getenv("INVOICE_LOGO_PATH") or None

MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

# Client views idle this long are dropped with their pages
VIEW_IDLE_SECONDS = int(os.getenv("VIEW_IDLE_SECONDS", str(30 * 60)))
MAX_OPEN_VIEWS = int(os.getenv("MAX_OPEN_VIEWS", "500"))
