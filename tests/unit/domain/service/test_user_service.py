"""Unit tests for UserService."""

import pytest

from hdnotes.domain.error import NotFoundError
from hdnotes.domain.service import UserService
from hdnotes.domain.value import AuthProvider, Email
from hdnotes.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import make_user


class TestUserService:
    """Tests for UserService lookups."""

    @pytest.mark.asyncio
    async def test_get_by_id_raises_when_missing(self):
        """Unknown ids raise NotFoundError."""
        service = UserService(InMemoryUserRepository())

        with pytest.raises(NotFoundError):
            await service.get_by_id(make_user().id)

    @pytest.mark.asyncio
    async def test_get_by_email_is_case_insensitive(self):
        """Emails are normalized before lookup."""
        repo = InMemoryUserRepository()
        service = UserService(repo)
        user = await service.create(make_user(email="ada@example.com"))

        found = await service.get_by_email(Email("  ADA@Example.com "))

        assert found is not None
        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_federated_identity_prefers_federated_id(self):
        """A Google link wins over an email match."""
        repo = InMemoryUserRepository()
        service = UserService(repo)
        by_email = await service.create(make_user(email="ada@example.com"))
        linked = await service.create(
            make_user(
                email="other@example.com",
                provider=AuthProvider.GOOGLE,
                federated_id="google-1",
            )
        )

        found = await service.get_by_federated_identity(
            Email("ada@example.com"), "google-1"
        )

        assert found is not None
        assert found.id == linked.id
        assert found.id != by_email.id

    @pytest.mark.asyncio
    async def test_federated_identity_falls_back_to_email(self):
        """Without a link, the email owner is returned."""
        repo = InMemoryUserRepository()
        service = UserService(repo)
        user = await service.create(make_user(email="ada@example.com"))

        found = await service.get_by_federated_identity(
            Email("ada@example.com"), "google-unknown"
        )

        assert found is not None
        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_create_rejects_duplicate_email(self):
        """The store keeps one user per email."""
        repo = InMemoryUserRepository()
        service = UserService(repo)
        await service.create(make_user(email="ada@example.com"))

        with pytest.raises(ValueError):
            await service.create(make_user(email="ada@example.com"))
