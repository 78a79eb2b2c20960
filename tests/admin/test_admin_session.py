from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.attendance_core.attendance_core.admin.service import AdminSessionSigner
from src.attendance_core.attendance_core.core.exceptions import ConfigurationError

SECRET = "unit-test-admin-secret-0123456789abcdef"
NOW = datetime(2026, 2, 7, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def signer() -> AdminSessionSigner:
    return AdminSessionSigner(SECRET)


def test_generate_format(signer):
    token = signer.generate(now=NOW)
    timestamp, signature = token.split(".")

    assert int(timestamp) == int(NOW.timestamp() * 1000)
    assert len(signature) == 64
    assert all(c in "0123456789abcdef" for c in signature)


def test_fresh_token_verifies(signer):
    assert signer.verify(signer.generate(now=NOW), now=NOW) is True


def test_token_valid_at_exactly_24_hours(signer):
    token = signer.generate(now=NOW)

    assert signer.verify(token, now=NOW + timedelta(hours=24)) is True


def test_token_rejected_at_24_hours_plus_1ms(signer):
    token = signer.generate(now=NOW)

    assert signer.verify(token, now=NOW + timedelta(hours=24, milliseconds=1)) is False


def test_token_from_the_future_rejected(signer):
    token = signer.generate(now=NOW + timedelta(seconds=1))

    assert signer.verify(token, now=NOW) is False


def test_wrong_signature_of_same_length_rejected(signer):
    timestamp, signature = signer.generate(now=NOW).split(".")
    forged = ("0" if signature[0] != "0" else "1") + signature[1:]

    assert len(forged) == len(signature)
    assert signer.verify(f"{timestamp}.{forged}", now=NOW) is False


def test_token_from_other_secret_rejected(signer):
    other = AdminSessionSigner("different-admin-secret-0123456789abcdef")

    assert signer.verify(other.generate(now=NOW), now=NOW) is False


@pytest.mark.parametrize(
    "token",
    [None, "", "abc", "123", "1.2.3", ".abc", "12a.ffff", "-5.ffff", " 1.ffff", "１２.ffff", "9" * 5000 + ".abcd"],
)
def test_malformed_tokens_rejected(signer, token):
    assert signer.verify(token, now=NOW) is False


def test_non_ascii_signature_rejected_without_error(signer):
    timestamp = signer.generate(now=NOW).split(".")[0]

    assert signer.verify(f"{timestamp}.é", now=NOW) is False


def test_max_age_matches_ttl(signer):
    assert signer.max_age_seconds == 24 * 60 * 60


@pytest.mark.parametrize("secret", [None, ""])
def test_missing_secret_raises(secret):
    with pytest.raises(ConfigurationError):
        AdminSessionSigner(secret)


def test_overlong_timestamp_rejected_without_error(signer):
    signature = signer.generate(now=NOW).split(".")[1]

    assert signer.verify("1" * 17 + "." + signature, now=NOW) is False
    assert signer.verify("9" * 5000 + "." + signature, now=NOW) is False


def test_cookie_name():
    assert AdminSessionSigner(SECRET).cookie_name == "admin_session"
