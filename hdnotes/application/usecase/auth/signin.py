"""Signin (request OTP) use case."""

import logfire

from hdnotes.application.usecase.auth.common import OTPSentResponse
from hdnotes.application.usecase.base import BaseUseCase, CamelModel
from hdnotes.domain.error import (
    SignupIncompleteError,
    UserNotFoundError,
    WrongProviderError,
)
from hdnotes.domain.service import Notifier, OTPService, UserService
from hdnotes.domain.value import AuthProvider, Email


class SigninRequest(CamelModel):
    """Signin request."""

    email: Email


class SigninUseCase(BaseUseCase):
    """Use case for emailing a signin passcode to a verified user."""

    def __init__(
        self,
        user_service: UserService,
        otp_service: OTPService,
        notifier: Notifier,
    ) -> None:
        """Initialize signin use case.

        Args:
            user_service: User domain service
            otp_service: OTP domain service
            notifier: Email dispatcher
        """
        self.user_service = user_service
        self.otp_service = otp_service
        self.notifier = notifier

    async def execute(self, request: SigninRequest) -> OTPSentResponse:
        """Execute signin flow.

        Args:
            request: Email to sign in with

        Returns:
            Confirmation echoing the email

        Raises:
            UserNotFoundError: If no user owns the email
            SignupIncompleteError: If the signup was never verified
            WrongProviderError: If the user signs in through Google
        """
        with logfire.span("signin", email=request.email.root):
            user = await self.user_service.get_by_email(request.email)
            if not user:
                raise UserNotFoundError("User not found with this email")
            if not user.is_email_verified:
                raise SignupIncompleteError()
            if user.auth_provider != AuthProvider.EMAIL:
                raise WrongProviderError()

            challenge = self.otp_service.issue()
            user = await self.user_service.save(
                user.with_changes(
                    challenge=challenge,
                )
            )

            await self.notifier.send_otp(user.email, challenge.code, user.name)

            logfire.info("Signin OTP sent", user_id=str(user.id))

            return OTPSentResponse(
                message="OTP sent successfully to your email",
                email=user.email,
            )
