"""Resend OTP use case."""

import logfire
from pydantic import BaseModel

from hdnotes.application.usecase.base import BaseUseCase, CamelModel
from hdnotes.domain.error import UserNotFoundError
from hdnotes.domain.service import Notifier, OTPService, UserService
from hdnotes.domain.value import Email


class ResendOTPRequest(CamelModel):
    """Resend OTP request."""

    email: Email


class ResendOTPResponse(BaseModel):
    """Resend OTP response."""

    message: str


class ResendOTPUseCase(BaseUseCase):
    """Use case for replacing the outstanding passcode.

    Works for any existing user, verified or not: an unfinished signup can
    ask for a new code here.
    """

    def __init__(
        self,
        user_service: UserService,
        otp_service: OTPService,
        notifier: Notifier,
    ) -> None:
        """Initialize resend OTP use case.

        Args:
            user_service: User domain service
            otp_service: OTP domain service
            notifier: Email dispatcher
        """
        self.user_service = user_service
        self.otp_service = otp_service
        self.notifier = notifier

    async def execute(self, request: ResendOTPRequest) -> ResendOTPResponse:
        """Issue a new challenge, invalidating the previous code.

        Args:
            request: Email of the user

        Returns:
            Confirmation message

        Raises:
            UserNotFoundError: If no user owns the email
        """
        with logfire.span("resend_otp", email=request.email.root):
            user = await self.user_service.get_by_email(request.email)
            if not user:
                raise UserNotFoundError()

            challenge = self.otp_service.issue()
            user = await self.user_service.save(
                user.with_changes(
                    challenge=challenge,
                )
            )

            await self.notifier.send_otp(user.email, challenge.code, user.name)

            logfire.info("OTP resent", user_id=str(user.id))

            return ResendOTPResponse(message="OTP resent successfully")
