"""Signup use case."""

from datetime import date
from uuid import uuid4

import logfire
from pydantic import field_validator

from hdnotes.application.usecase.auth.common import OTPSentResponse
from hdnotes.application.usecase.base import BaseUseCase, CamelModel
from hdnotes.domain.error import UserAlreadyExistsError
from hdnotes.domain.model import User
from hdnotes.domain.service import Notifier, OTPService, UserService
from hdnotes.domain.value import AuthProvider, Email, UserId


class SignupRequest(CamelModel):
    """Signup request."""

    name: str
    email: Email
    date_of_birth: date

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Trim and bound the display name."""
        v = v.strip()
        if len(v) < 2 or len(v) > 50:
            raise ValueError("Name must be 2-50 characters")
        return v

    @field_validator("date_of_birth")
    @classmethod
    def validate_date_of_birth(cls, v: date) -> date:
        """Reject birth dates in the future."""
        if v > date.today():
            raise ValueError("Date of birth cannot be in the future")
        return v


class SignupUseCase(BaseUseCase):
    """Use case for starting an email signup."""

    def __init__(
        self,
        user_service: UserService,
        otp_service: OTPService,
        notifier: Notifier,
    ) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            otp_service: OTP domain service
            notifier: Email dispatcher
        """
        self.user_service = user_service
        self.otp_service = otp_service
        self.notifier = notifier

    async def execute(self, request: SignupRequest) -> OTPSentResponse:
        """Execute signup flow.

        Steps:
        1. Reject if a verified user already owns the email
        2. Create the user, or refresh an unfinished signup, with a new challenge
        3. Email the passcode

        Args:
            request: Validated signup payload

        Returns:
            Confirmation echoing the email

        Raises:
            UserAlreadyExistsError: If the email belongs to a verified user
        """
        with logfire.span("signup", email=request.email.root):
            existing = await self.user_service.get_by_email(request.email)

            if existing and existing.is_email_verified:
                raise UserAlreadyExistsError()

            challenge = self.otp_service.issue()

            if existing:
                # Unfinished signup: details may change before verification
                user = await self.user_service.save(
                    existing.with_changes(
                        name=request.name,
                        date_of_birth=request.date_of_birth,
                        challenge=challenge,
                    )
                )
            else:
                user = await self.user_service.create(
                    User(
                        id=UserId(uuid4()),
                        name=request.name,
                        email=request.email,
                        date_of_birth=request.date_of_birth,
                        auth_provider=AuthProvider.EMAIL,
                        challenge=challenge,
                    )
                )

            await self.notifier.send_otp(user.email, challenge.code, user.name)

            logfire.info("Signup OTP sent", user_id=str(user.id))

            return OTPSentResponse(
                message="OTP sent successfully to your email",
                email=user.email,
            )
