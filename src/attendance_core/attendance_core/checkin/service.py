from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Optional

import jwt
from jwt.utils import base64url_decode, base64url_encode

from ..common.datetime_utils import ensure_aware, from_epoch_millis, now_utc, to_epoch_millis
from ..common.validators import require_non_empty, require_secret
from ..core.constants import CHECKIN_TOKEN_ALGORITHM, CHECKIN_TOKEN_TTL_SECONDS
from ..core.exceptions import InvalidTokenError, ValidationError
from .model import CheckInTokenPayload

logger = logging.getLogger(__name__)

CLAIM_KEYS = ("sessionId", "issuedAt", "expiresAt")


class CheckInTokenService:
    """Issues and verifies the short-lived tokens shown as check-in QR codes.

    Tokens are compact JWTs signed with a single pinned algorithm (HS256). The
    claims are ``sessionId`` plus ``issuedAt``/``expiresAt`` in Unix
    milliseconds. Expiry is checked against ``expiresAt`` only; there is no
    leeway.
    """

    def __init__(self, secret: Optional[str], *, ttl_seconds: int = CHECKIN_TOKEN_TTL_SECONDS):
        self._key = require_secret(secret, "CHECKIN_TOKEN_SECRET")
        if ttl_seconds <= 0:
            raise ValidationError("ttl_seconds must be positive")
        self._ttl = timedelta(seconds=ttl_seconds)

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    def issue(self, session_id: str, *, now: Optional[datetime] = None) -> str:
        session_id = require_non_empty(session_id, "session_id")
        issued_at = to_epoch_millis(now or now_utc())
        claims = {
            "sessionId": session_id,
            "issuedAt": issued_at,
            "expiresAt": issued_at + self._ttl // timedelta(milliseconds=1),
        }
        token = jwt.encode(claims, self._key, algorithm=CHECKIN_TOKEN_ALGORITHM)
        logger.info("Issued check-in token for session %s", session_id)
        return token

    def verify(self, token: Any, *, now: Optional[datetime] = None) -> Optional[CheckInTokenPayload]:
        """Return the payload of a valid token, or None.

        Malformed, forged, wrong-algorithm and expired tokens all give None.
        """
        try:
            return self._decode(token, now or now_utc())
        except InvalidTokenError as exc:
            logger.debug("Rejected check-in token: %s", exc)
            return None

    def time_remaining(self, payload: CheckInTokenPayload, *, now: Optional[datetime] = None) -> int:
        """Whole seconds until expiry, for countdown display only."""
        remaining = payload.expires_at - ensure_aware(now or now_utc())
        return max(0, int(remaining.total_seconds()))

    def _decode(self, token: Any, now: datetime) -> CheckInTokenPayload:
        if not isinstance(token, str) or token.count(".") != 2:
            raise InvalidTokenError("malformed")

        try:
            header = jwt.get_unverified_header(token)
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("malformed header") from exc
        if header.get("alg") != CHECKIN_TOKEN_ALGORITHM:
            raise InvalidTokenError("unexpected algorithm")

        # base64url ignores trailing pad bits, so two spellings of one signature
        # would both verify. Only the canonical spelling is accepted.
        signature_segment = token.rsplit(".", 1)[1]
        try:
            canonical = base64url_encode(base64url_decode(signature_segment)).decode("ascii")
        except (ValueError, TypeError) as exc:
            raise InvalidTokenError("malformed signature") from exc
        if canonical != signature_segment:
            raise InvalidTokenError("non-canonical signature")

        try:
            claims = jwt.decode(
                token,
                self._key,
                algorithms=[CHECKIN_TOKEN_ALGORITHM],
                options={"require": list(CLAIM_KEYS)},
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError(type(exc).__name__) from exc

        session_id = claims.get("sessionId")
        issued_at = claims.get("issuedAt")
        expires_at = claims.get("expiresAt")
        if not isinstance(session_id, str) or not session_id:
            raise InvalidTokenError("bad sessionId claim")
        if not _is_millis(issued_at) or not _is_millis(expires_at):
            raise InvalidTokenError("bad timestamp claims")
        if expires_at < issued_at or expires_at - issued_at > self._ttl // timedelta(milliseconds=1):
            raise InvalidTokenError("lifetime exceeds ttl")
        if to_epoch_millis(now) > expires_at:
            raise InvalidTokenError("expired")

        return CheckInTokenPayload(
            session_id=session_id,
            issued_at=from_epoch_millis(issued_at),
            expires_at=from_epoch_millis(expires_at),
        )


def _is_millis(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
