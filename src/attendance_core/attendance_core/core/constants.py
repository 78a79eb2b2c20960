"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

CHECKIN_TOKEN_TTL_SECONDS = 60
CHECKIN_TOKEN_ALGORITHM = "HS256"

ADMIN_SESSION_TTL_MS = 24 * 60 * 60 * 1000
ADMIN_SESSION_COOKIE_NAME = "admin_session"

DEFAULT_TIMEZONE = "America/Chicago"
DEFAULT_TREND_WEEKS = 12
DEFAULT_HISTORY_LIMIT = 20
