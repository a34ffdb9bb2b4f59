"""Unit tests for VerifyOTPUseCase."""

from dishka import AsyncContainer
import pytest

from hdnotes.adapter.error import NotificationError
from hdnotes.application.usecase.auth import VerifyOTPUseCase
from hdnotes.application.usecase.auth.verify_otp import VerifyOTPRequest
from hdnotes.domain.error import InvalidOTPError, OTPExpiredError, UserNotFoundError
from hdnotes.domain.repository import UserRepository
from hdnotes.domain.service import JWTService, Notifier
from hdnotes.domain.value import Email
from tests.conftest import make_challenge, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestVerifyOTPUseCase:
    """Tests for VerifyOTPUseCase."""

    @pytest.mark.asyncio
    async def test_verify_within_window_marks_user_verified(
        self, unit_env: AsyncContainer
    ):
        """Correct code at T+100s verifies the user and clears the challenge."""
        # Arrange
        use_case = await unit_env.get(VerifyOTPUseCase)
        repo = await unit_env.get(UserRepository)
        jwt_service = await unit_env.get(JWTService)
        notifier = await unit_env.get(Notifier)
        pending = await repo.create(
            make_user(
                verified=False,
                challenge=make_challenge("123456", issued_seconds_ago=100),
            )
        )

        # Act
        response = await use_case.execute(
            VerifyOTPRequest(email="ada@example.com", otp="123456")
        )

        # Assert
        assert response.message == "Email verified successfully"
        assert response.user.id == str(pending.id)
        assert jwt_service.verify_token(response.token).user_id == str(pending.id)

        user = await repo.find_by_id(pending.id)
        assert user.is_email_verified is True
        assert user.challenge is None

        assert notifier.sent_welcomes == [(Email("ada@example.com"), pending.name)]

    @pytest.mark.asyncio
    async def test_replaying_code_is_invalid(self, unit_env):
        """A consumed code cannot be used twice."""
        use_case = await unit_env.get(VerifyOTPUseCase)
        repo = await unit_env.get(UserRepository)
        await repo.create(
            make_user(verified=False, challenge=make_challenge("123456"))
        )
        request = VerifyOTPRequest(email="ada@example.com", otp="123456")
        await use_case.execute(request)

        with pytest.raises(InvalidOTPError, match="Invalid OTP"):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_expired_code_changes_nothing(self, unit_env):
        """Correct code at T+700s is expired and leaves the user untouched."""
        use_case = await unit_env.get(VerifyOTPUseCase)
        repo = await unit_env.get(UserRepository)
        notifier = await unit_env.get(Notifier)
        pending = await repo.create(
            make_user(
                verified=False,
                challenge=make_challenge("123456", issued_seconds_ago=700),
            )
        )

        with pytest.raises(OTPExpiredError, match="OTP has expired"):
            await use_case.execute(
                VerifyOTPRequest(email="ada@example.com", otp="123456")
            )

        assert await repo.find_by_id(pending.id) == pending
        assert notifier.sent_welcomes == []

    @pytest.mark.asyncio
    async def test_wrong_code_changes_nothing(self, unit_env):
        """Wrong code is rejected without mutation."""
        use_case = await unit_env.get(VerifyOTPUseCase)
        repo = await unit_env.get(UserRepository)
        pending = await repo.create(
            make_user(verified=False, challenge=make_challenge("123456"))
        )

        with pytest.raises(InvalidOTPError):
            await use_case.execute(
                VerifyOTPRequest(email="ada@example.com", otp="654321")
            )

        assert await repo.find_by_id(pending.id) == pending

    @pytest.mark.asyncio
    async def test_unknown_email(self, unit_env):
        """Verifying an unknown email fails."""
        use_case = await unit_env.get(VerifyOTPUseCase)

        with pytest.raises(UserNotFoundError, match="User not found"):
            await use_case.execute(
                VerifyOTPRequest(email="nobody@example.com", otp="123456")
            )

    @pytest.mark.asyncio
    async def test_welcome_failure_keeps_verification(self, unit_env):
        """A failed welcome email fails the call after the user is verified."""
        use_case = await unit_env.get(VerifyOTPUseCase)
        repo = await unit_env.get(UserRepository)
        notifier = await unit_env.get(Notifier)
        pending = await repo.create(
            make_user(verified=False, challenge=make_challenge("123456"))
        )
        notifier.fail = True

        with pytest.raises(NotificationError):
            await use_case.execute(
                VerifyOTPRequest(email="ada@example.com", otp="123456")
            )

        user = await repo.find_by_id(pending.id)
        assert user.is_email_verified is True
        assert user.challenge is None
