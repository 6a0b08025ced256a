SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

COMPANY_NAME = "Mandi Al Khalij Limited"
INVOICE_LOGO_PATH = None

MAX_UPLOAD_BYTES = 64 * 1024

SEED_DEMO_DATA = True

VIEW_IDLE_SECONDS = 60
MAX_OPEN_VIEWS = 20
