from __future__ import annotations

from typing import Optional

from ..core.exceptions import ConfigurationError, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_secret(value: Optional[str], field_name: str) -> bytes:
    """Signing secrets are mandatory; absence is a deployment error, not a bad token."""
    if value is None or not str(value).strip():
        raise ConfigurationError(f"{field_name} is not configured")
    return str(value).encode("utf-8")


def require_non_negative(value: int, field_name: str) -> int:
    if value < 0:
        raise ValidationError(f"{field_name} must be >= 0")
    return int(value)
