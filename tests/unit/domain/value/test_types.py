"""Unit tests for domain value objects."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from hdnotes.domain.value import Email, OTPCode, PendingChallenge


class TestEmail:
    """Tests for Email."""

    def test_normalizes_case_and_whitespace(self):
        assert Email("  Ada@Example.COM ").root == "ada@example.com"

    def test_equal_after_normalization(self):
        assert Email("ADA@example.com") == Email("ada@example.com")

    @pytest.mark.parametrize("value", ["", "ada", "ada@", "@example.com", "a b@c.de"])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValidationError, match="Email must be a valid email"):
            Email(value)

    def test_rejects_too_long(self):
        with pytest.raises(ValidationError, match="Email is too long"):
            Email("a" * 250 + "@example.com")


class TestOTPCode:
    """Tests for OTPCode."""

    def test_accepts_digits(self):
        assert OTPCode("012345").root == "012345"

    @pytest.mark.parametrize("value", ["12a456", "", "123", "12 3456"])
    def test_rejects_non_numeric(self, value):
        with pytest.raises(ValidationError):
            OTPCode(value)

    def test_matches(self):
        assert OTPCode("123456").matches(OTPCode("123456"))
        assert not OTPCode("123456").matches(OTPCode("654321"))


class TestPendingChallenge:
    """Tests for PendingChallenge."""

    def test_expiry_boundary(self):
        """Valid strictly before expires_at."""
        expires_at = datetime(2026, 1, 1, tzinfo=timezone.utc)
        challenge = PendingChallenge(code=OTPCode("123456"), expires_at=expires_at)

        assert not challenge.is_expired(expires_at - timedelta(microseconds=1))
        assert challenge.is_expired(expires_at)
        assert challenge.is_expired(expires_at + timedelta(seconds=1))

    def test_is_immutable(self):
        challenge = PendingChallenge(
            code=OTPCode("123456"), expires_at=datetime.now(timezone.utc)
        )

        with pytest.raises(ValidationError):
            challenge.code = OTPCode("654321")
