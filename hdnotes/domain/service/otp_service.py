"""One-time passcode domain service."""

import secrets
from datetime import datetime, timedelta, timezone

import logfire

from hdnotes.config import OTPSettings
from hdnotes.domain.error import InvalidOTPError, OTPExpiredError
from hdnotes.domain.value import OTPCode, PendingChallenge

from .base import Service


class OTPService(Service):
    """Issues and checks one-time passcodes.

    Holds no state of its own: a challenge lives on the user record and
    this service only computes and compares.
    """

    def __init__(self, otp_settings: OTPSettings) -> None:
        """Initialize OTP service.

        Args:
            otp_settings: Code length and validity window
        """
        self.otp_settings = otp_settings

    def generate_code(self) -> OTPCode:
        """Draw a uniformly distributed fixed-width numeric code."""
        length = self.otp_settings.length
        return OTPCode(f"{secrets.randbelow(10**length):0{length}d}")

    def issue(self, now: datetime | None = None) -> PendingChallenge:
        """Issue a fresh challenge.

        Args:
            now: Issue time (defaults to the current UTC time)

        Returns:
            Challenge expiring expiry_minutes after now
        """
        now = now or datetime.now(timezone.utc)
        challenge = PendingChallenge(
            code=self.generate_code(),
            expires_at=now + timedelta(minutes=self.otp_settings.expiry_minutes),
        )
        logfire.debug("OTP challenge issued", expires_at=challenge.expires_at)
        return challenge

    def verify(
        self,
        challenge: PendingChallenge | None,
        code: OTPCode,
        now: datetime | None = None,
    ) -> None:
        """Check a submitted code against the pending challenge.

        The code is compared before the expiry so a wrong guess never
        learns whether a challenge is still live.

        Args:
            challenge: The user's pending challenge, if any
            code: Code submitted by the user
            now: Verification time (defaults to the current UTC time)

        Raises:
            InvalidOTPError: If nothing is pending or the code does not match
            OTPExpiredError: If the code matches but the window has passed
        """
        now = now or datetime.now(timezone.utc)

        if challenge is None or not challenge.code.matches(code):
            logfire.warn("OTP rejected", reason="mismatch")
            raise InvalidOTPError()

        if challenge.is_expired(now):
            logfire.warn(
                "OTP rejected", reason="expired", expires_at=challenge.expires_at
            )
            raise OTPExpiredError()
