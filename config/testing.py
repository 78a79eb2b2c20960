CHECKIN_TOKEN_SECRET = "test-checkin-token-secret-0123456789abcdef"
ADMIN_SESSION_SECRET = "test-admin-session-secret-0123456789abcdef"

LOCAL_TIMEZONE = "America/Chicago"

LOG_LEVEL = "DEBUG"
LOG_FORMAT = "plain"
