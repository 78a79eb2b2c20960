import os

# Development-only signing keys; production has no defaults
CHECKIN_TOKEN_SECRET = os.getenv("CHECKIN_TOKEN_SECRET", "dev-checkin-token-secret-change-me-0001")
ADMIN_SESSION_SECRET = os.getenv("ADMIN_SESSION_SECRET", "dev-admin-session-secret-change-me-0001")

LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "America/Chicago")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = os.getenv("LOG_FORMAT", "plain")
