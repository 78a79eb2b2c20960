from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CheckInTokenPayload:
    """Verified contents of a check-in token."""

    session_id: str
    issued_at: datetime
    expires_at: datetime
