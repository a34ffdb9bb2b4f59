"""Unit tests for OTPService."""

from datetime import datetime, timedelta, timezone

import pytest

from hdnotes.config import OTPSettings
from hdnotes.domain.error import InvalidOTPError, OTPExpiredError
from hdnotes.domain.service import OTPService
from hdnotes.domain.value import OTPCode

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def otp_service() -> OTPService:
    return OTPService(OTPSettings(length=6, expiry_minutes=10))


class TestGenerateCode:
    """Tests for OTPService.generate_code()."""

    def test_generates_six_digit_code(self, otp_service):
        """Codes are fixed-width numeric strings."""
        for _ in range(50):
            code = otp_service.generate_code()
            assert len(code.root) == 6
            assert code.root.isdigit()

    def test_respects_configured_length(self):
        """Length comes from settings."""
        service = OTPService(OTPSettings(length=8))

        assert len(service.generate_code().root) == 8


class TestIssue:
    """Tests for OTPService.issue()."""

    def test_expiry_is_ten_minutes_after_issue(self, otp_service):
        """Challenge expires expiry_minutes after the issue time."""
        challenge = otp_service.issue(now=T0)

        assert challenge.expires_at == T0 + timedelta(minutes=10)

    def test_defaults_to_current_time(self, otp_service):
        """Without an explicit time the challenge is anchored on now."""
        before = datetime.now(timezone.utc)
        challenge = otp_service.issue()
        after = datetime.now(timezone.utc)

        assert before + timedelta(minutes=10) <= challenge.expires_at
        assert challenge.expires_at <= after + timedelta(minutes=10)


class TestVerify:
    """Tests for OTPService.verify()."""

    def test_accepts_matching_code_before_expiry(self, otp_service):
        """Matching code within the window passes."""
        challenge = otp_service.issue(now=T0)

        otp_service.verify(challenge, challenge.code, now=T0 + timedelta(seconds=100))

    def test_rejects_code_at_exact_expiry(self, otp_service):
        """A code is valid only strictly before expires_at."""
        challenge = otp_service.issue(now=T0)

        with pytest.raises(OTPExpiredError):
            otp_service.verify(challenge, challenge.code, now=challenge.expires_at)

    def test_rejects_expired_code(self, otp_service):
        """Matching code after the window is expired."""
        challenge = otp_service.issue(now=T0)

        with pytest.raises(OTPExpiredError, match="OTP has expired"):
            otp_service.verify(
                challenge, challenge.code, now=T0 + timedelta(seconds=700)
            )

    def test_rejects_wrong_code(self, otp_service):
        """A different code is invalid."""
        challenge = otp_service.issue(now=T0)
        wrong = OTPCode("000000" if challenge.code.root != "000000" else "111111")

        with pytest.raises(InvalidOTPError, match="Invalid OTP"):
            otp_service.verify(challenge, wrong, now=T0)

    def test_wrong_code_reported_before_expiry(self, otp_service):
        """A wrong code on an expired challenge is still just invalid."""
        challenge = otp_service.issue(now=T0)
        wrong = OTPCode("000000" if challenge.code.root != "000000" else "111111")

        with pytest.raises(InvalidOTPError):
            otp_service.verify(challenge, wrong, now=T0 + timedelta(hours=1))

    def test_rejects_when_no_challenge_pending(self, otp_service):
        """Nothing pending means any code is invalid."""
        with pytest.raises(InvalidOTPError):
            otp_service.verify(None, OTPCode("123456"), now=T0)
