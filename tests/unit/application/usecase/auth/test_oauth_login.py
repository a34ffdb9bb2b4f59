"""Unit tests for OAuthLoginUseCase."""

import pytest

from hdnotes.adapter.google import GoogleOAuthError, MockGoogleOAuthClient
from hdnotes.application.usecase.auth import OAuthLoginUseCase
from hdnotes.application.usecase.auth.oauth_login import OAuthLoginRequest
from hdnotes.domain.repository import UserRepository
from hdnotes.domain.value import AuthProvider
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestOAuthLoginUseCase:
    """Tests for OAuthLoginUseCase."""

    @pytest.mark.asyncio
    async def test_callback_registers_google_user(self, unit_env):
        """The profile from the code exchange goes through federated login."""
        use_case = await unit_env.get(OAuthLoginUseCase)
        repo = await unit_env.get(UserRepository)

        response = await use_case.execute(
            OAuthLoginRequest(code="oauth_code_123", state="state_123")
        )

        user = await repo.find_by_federated_id(MockGoogleOAuthClient.provider_user_id)
        assert user is not None
        assert user.auth_provider == AuthProvider.GOOGLE
        assert user.email.root == MockGoogleOAuthClient.email
        assert response.user.id == str(user.id)

    @pytest.mark.asyncio
    async def test_failed_exchange_propagates(self, unit_env):
        """Provider errors surface and nothing is stored."""
        use_case = await unit_env.get(OAuthLoginUseCase)
        repo = await unit_env.get(UserRepository)

        with pytest.raises(GoogleOAuthError):
            await use_case.execute(OAuthLoginRequest(code="invalid", state="s"))

        assert repo.count() == 0
