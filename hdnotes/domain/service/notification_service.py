"""Notification dispatcher interface."""

from hdnotes.domain.value import Email, OTPCode


class Notifier:
    """Sends account emails to users.

    Implementations raise on delivery failure; callers treat that as a
    failed request.
    """

    async def send_otp(self, email: Email, code: OTPCode, name: str) -> None:
        """Send a one-time passcode.

        Args:
            email: Recipient address
            code: Passcode to deliver
            name: Recipient display name
        """
        raise NotImplementedError

    async def send_welcome(self, email: Email, name: str) -> None:
        """Send the welcome message after a first verification.

        Args:
            email: Recipient address
            name: Recipient display name
        """
        raise NotImplementedError
