"""Verify signin OTP use case."""

import logfire

from hdnotes.application.usecase.auth.common import AuthResponse, PublicProfile
from hdnotes.application.usecase.base import BaseUseCase, CamelModel
from hdnotes.domain.error import UserNotFoundError
from hdnotes.domain.service import JWTService, OTPService, UserService
from hdnotes.domain.value import Email, OTPCode


class SigninVerifyRequest(CamelModel):
    """Signin verification request."""

    email: Email
    otp: OTPCode


class SigninVerifyUseCase(BaseUseCase):
    """Use case for exchanging a signin passcode for a session token."""

    def __init__(
        self,
        user_service: UserService,
        otp_service: OTPService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize signin verify use case.

        Args:
            user_service: User domain service
            otp_service: OTP domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.otp_service = otp_service
        self.jwt_service = jwt_service

    async def execute(self, request: SigninVerifyRequest) -> AuthResponse:
        """Execute signin verification.

        Args:
            request: Email and submitted code

        Returns:
            Session token and public profile

        Raises:
            UserNotFoundError: If no user owns the email
            InvalidOTPError: If no challenge is pending or the code differs
            OTPExpiredError: If the code matches but has expired
        """
        with logfire.span("signin_verify", email=request.email.root):
            user = await self.user_service.get_by_email(request.email)
            if not user:
                raise UserNotFoundError()

            self.otp_service.verify(user.challenge, request.otp)

            user = await self.user_service.save(
                user.with_changes(
                    challenge=None,
                )
            )

            token = self.jwt_service.create_token(str(user.id))

            logfire.info("User signed in", user_id=str(user.id))

            return AuthResponse(
                message="Signed in successfully",
                token=token,
                user=PublicProfile.from_user(user),
            )
