"""Verify signup OTP use case."""

import logfire

from hdnotes.application.usecase.auth.common import AuthResponse, PublicProfile
from hdnotes.application.usecase.base import BaseUseCase, CamelModel
from hdnotes.domain.error import UserNotFoundError
from hdnotes.domain.service import JWTService, Notifier, OTPService, UserService
from hdnotes.domain.value import Email, OTPCode


class VerifyOTPRequest(CamelModel):
    """Verify OTP request."""

    email: Email
    otp: OTPCode


class VerifyOTPUseCase(BaseUseCase):
    """Use case for completing an email signup."""

    def __init__(
        self,
        user_service: UserService,
        otp_service: OTPService,
        jwt_service: JWTService,
        notifier: Notifier,
    ) -> None:
        """Initialize verify OTP use case.

        Args:
            user_service: User domain service
            otp_service: OTP domain service
            jwt_service: JWT token domain service
            notifier: Email dispatcher
        """
        self.user_service = user_service
        self.otp_service = otp_service
        self.jwt_service = jwt_service
        self.notifier = notifier

    async def execute(self, request: VerifyOTPRequest) -> AuthResponse:
        """Execute signup verification.

        Steps:
        1. Load the user and check the code (match, then expiry)
        2. Clear the challenge and mark the email verified
        3. Send the welcome email
        4. Issue a session token

        Nothing is written unless both checks pass. Once the user is saved,
        a failing welcome email still fails the request; the verification
        stands.

        Args:
            request: Email and submitted code

        Returns:
            Session token and public profile

        Raises:
            UserNotFoundError: If no user owns the email
            InvalidOTPError: If no challenge is pending or the code differs
            OTPExpiredError: If the code matches but has expired
        """
        with logfire.span("verify_otp", email=request.email.root):
            user = await self.user_service.get_by_email(request.email)
            if not user:
                raise UserNotFoundError()

            self.otp_service.verify(user.challenge, request.otp)

            user = await self.user_service.save(
                user.with_changes(
                    is_email_verified=True,
                    challenge=None,
                )
            )

            await self.notifier.send_welcome(user.email, user.name)

            token = self.jwt_service.create_token(str(user.id))

            logfire.info("Email verified", user_id=str(user.id))

            return AuthResponse(
                message="Email verified successfully",
                token=token,
                user=PublicProfile.from_user(user),
            )
