from __future__ import annotations

import hashlib
import hmac
import logging
import re
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import now_utc, to_epoch_millis
from ..common.validators import require_secret
from ..core.constants import ADMIN_SESSION_COOKIE_NAME, ADMIN_SESSION_TTL_MS
from ..core.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

# Unix milliseconds, bounded before int()
_TIMESTAMP_RE = re.compile(r"[0-9]{1,16}")


class AdminSessionSigner:
    """Signs and checks the admin session cookie value ``<unix-ms>.<hex hmac>``."""

    def __init__(self, secret: Optional[str]):
        self._key = require_secret(secret, "ADMIN_SESSION_SECRET")

    @property
    def cookie_name(self) -> str:
        return ADMIN_SESSION_COOKIE_NAME

    @property
    def max_age_seconds(self) -> int:
        return ADMIN_SESSION_TTL_MS // 1000

    def generate(self, *, now: Optional[datetime] = None) -> str:
        timestamp = str(to_epoch_millis(now or now_utc()))
        return f"{timestamp}.{self._sign(timestamp)}"

    def verify(self, token: Any, *, now: Optional[datetime] = None) -> bool:
        try:
            self._check(token, to_epoch_millis(now or now_utc()))
        except InvalidTokenError as exc:
            logger.debug("Rejected admin session token: %s", exc)
            return False
        return True

    def _check(self, token: Any, now_ms: int) -> None:
        if not isinstance(token, str):
            raise InvalidTokenError("malformed")
        parts = token.split(".")
        if len(parts) != 2:
            raise InvalidTokenError("malformed")
        timestamp, signature = parts
        if not _TIMESTAMP_RE.fullmatch(timestamp):
            raise InvalidTokenError("malformed timestamp")

        age = now_ms - int(timestamp)
        if age < 0:
            raise InvalidTokenError("issued in the future")
        if age > ADMIN_SESSION_TTL_MS:
            raise InvalidTokenError("expired")

        expected = self._sign(timestamp)
        if not hmac.compare_digest(signature.encode("utf-8"), expected.encode("ascii")):
            raise InvalidTokenError("signature mismatch")

    def _sign(self, timestamp: str) -> str:
        return hmac.new(self._key, timestamp.encode("ascii"), hashlib.sha256).hexdigest()
