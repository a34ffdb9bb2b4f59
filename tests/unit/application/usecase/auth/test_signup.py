"""Unit tests for SignupUseCase."""

from datetime import date, datetime, timedelta, timezone

from dishka import AsyncContainer
import pytest
from pydantic import ValidationError

from hdnotes.adapter.error import NotificationError
from hdnotes.application.usecase.auth import SignupUseCase
from hdnotes.application.usecase.auth.signup import SignupRequest
from hdnotes.domain.error import UserAlreadyExistsError
from hdnotes.domain.repository import UserRepository
from hdnotes.domain.service import Notifier
from hdnotes.domain.value import AuthProvider, Email
from tests.conftest import make_challenge, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _request(email: str = "ada@example.com", name: str = "Ada") -> SignupRequest:
    return SignupRequest(name=name, email=email, date_of_birth=date(1990, 12, 10))


class TestSignupUseCase:
    """Tests for SignupUseCase."""

    @pytest.mark.asyncio
    async def test_signup_creates_pending_user_and_sends_otp(
        self, unit_env: AsyncContainer
    ):
        """Unknown email becomes a pending user with a 10 minute challenge."""
        # Arrange
        use_case = await unit_env.get(SignupUseCase)
        repo = await unit_env.get(UserRepository)
        notifier = await unit_env.get(Notifier)
        before = datetime.now(timezone.utc)

        # Act
        response = await use_case.execute(_request())

        # Assert
        assert response.message == "OTP sent successfully to your email"
        assert response.email == Email("ada@example.com")

        user = await repo.find_by_email(Email("ada@example.com"))
        assert user is not None
        assert user.name == "Ada"
        assert user.auth_provider == AuthProvider.EMAIL
        assert user.is_email_verified is False
        assert user.is_pending_verification
        assert user.challenge.expires_at >= before + timedelta(minutes=10)
        assert user.challenge.expires_at <= datetime.now(timezone.utc) + timedelta(
            minutes=10
        )

        assert notifier.last_otp_for(user.email) == user.challenge.code

    @pytest.mark.asyncio
    async def test_signup_rejects_verified_email(self, unit_env):
        """Verified users cannot sign up again."""
        use_case = await unit_env.get(SignupUseCase)
        repo = await unit_env.get(UserRepository)
        notifier = await unit_env.get(Notifier)
        existing = await repo.create(make_user(email="ada@example.com"))

        with pytest.raises(UserAlreadyExistsError, match="User already exists"):
            await use_case.execute(_request())

        assert await repo.find_by_id(existing.id) == existing
        assert notifier.sent_otps == []

    @pytest.mark.asyncio
    async def test_signup_again_replaces_pending_challenge(self, unit_env):
        """An unfinished signup gets new details and a new code."""
        use_case = await unit_env.get(SignupUseCase)
        repo = await unit_env.get(UserRepository)
        old_challenge = make_challenge("111111", issued_seconds_ago=300)
        pending = await repo.create(
            make_user(
                email="ada@example.com",
                name="Old Name",
                verified=False,
                challenge=old_challenge,
            )
        )

        await use_case.execute(_request(name="New Name"))

        user = await repo.find_by_id(pending.id)
        assert user.name == "New Name"
        assert user.challenge is not None
        assert user.challenge.expires_at > old_challenge.expires_at
        assert user.is_email_verified is False
        assert repo.count() == 1

    @pytest.mark.asyncio
    async def test_notifier_failure_keeps_pending_user(self, unit_env):
        """A failed email fails the call but the user stays pending."""
        use_case = await unit_env.get(SignupUseCase)
        repo = await unit_env.get(UserRepository)
        notifier = await unit_env.get(Notifier)
        notifier.fail = True

        with pytest.raises(NotificationError):
            await use_case.execute(_request())

        user = await repo.find_by_email(Email("ada@example.com"))
        assert user is not None
        assert user.is_pending_verification


class TestSignupRequest:
    """Tests for signup payload validation."""

    def test_accepts_camel_case(self):
        request = SignupRequest.model_validate(
            {"name": "  Ada  ", "email": "ADA@example.com", "dateOfBirth": "1990-12-10"}
        )

        assert request.name == "Ada"
        assert request.email.root == "ada@example.com"
        assert request.date_of_birth == date(1990, 12, 10)

    @pytest.mark.parametrize("name", ["A", " A ", "x" * 51])
    def test_rejects_name_length(self, name):
        with pytest.raises(ValidationError, match="Name must be 2-50 characters"):
            SignupRequest(name=name, email="ada@example.com", date_of_birth="1990-01-01")

    def test_rejects_future_birth_date(self):
        with pytest.raises(ValidationError, match="cannot be in the future"):
            SignupRequest(
                name="Ada",
                email="ada@example.com",
                date_of_birth=date.today() + timedelta(days=1),
            )

    def test_rejects_bad_email(self):
        with pytest.raises(ValidationError, match="Email must be a valid email"):
            SignupRequest(name="Ada", email="not-an-email", date_of_birth="1990-01-01")
