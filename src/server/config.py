# src/server/config.py

# --- Server Configuration ---
SERVER_HOST = "0.0.0.0" # Default bind host when HOST is not set
SERVER_PORT = 8080 # Default port when PORT is unset or empty

# --- API Metadata ---
API_TITLE = "Legal Config Server"
API_VERSION = "1.0.0"

# --- Path Configuration ---
API_PREFIX = "/api"
CONFIG_ENDPOINT_PATH = "/config" # Mounted under API_PREFIX

# --- CORS Configuration ---
CORS_ALLOWED_ORIGINS = ["*"]
CORS_ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]
CORS_ALLOWED_HEADERS = ["Origin", "Content-Length", "Content-Type"]
CORS_ALLOW_CREDENTIALS = False # Must stay False while origins is "*"
CORS_MAX_AGE_SECONDS = 12 * 60 * 60 # How long browsers may cache a preflight answer
CORS_PREFLIGHT_STATUS = 204 # Preflights are answered without a body

# --- Legal Constants ---
# 2024/2025 French figures, approximate values for demonstration
LEGAL_SMIC = 1398.69 # Net monthly minimum wage
LEGAL_TAX_RATE_LOW = 0.11
LEGAL_TAX_RATE_HIGH = 0.30
LEGAL_POINTS_METHOD = "Pilotelle"

# --- Logging Configuration ---
LOG_FORMAT_CONSOLE = "%(asctime)s | %(message_log_color)s%(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# --- Payload Keys ---
PAYLOAD_KEY_DETAIL = "detail"

# --- Default Messages ---
ERROR_MSG_INTERNAL = "Internal Server Error"
