import os

# No defaults: a missing secret must stop startup (ConfigurationError)
CHECKIN_TOKEN_SECRET = os.getenv("CHECKIN_TOKEN_SECRET")
ADMIN_SESSION_SECRET = os.getenv("ADMIN_SESSION_SECRET")

LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "America/Chicago")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")
