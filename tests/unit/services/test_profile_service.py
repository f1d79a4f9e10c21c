"""Unit tests for ProfileService."""

from unittest.mock import AsyncMock

import pytest

from core.exceptions import AppException, ProfileValidationError, UserNotFoundError
from domain.entities.profile import ProfilePatch, UserProfile
from domain.services.profile_service import ProfileService


@pytest.fixture
def repo() -> AsyncMock:
    repo = AsyncMock()
    repo.save.side_effect = lambda profile: profile
    return repo


@pytest.fixture
def service(repo: AsyncMock) -> ProfileService:
    return ProfileService(repo)


class TestGet:
    @pytest.mark.asyncio
    async def test_returns_profile(self, service: ProfileService, repo: AsyncMock, john: UserProfile):
        repo.get.return_value = john

        assert await service.get("user-123") == john
        repo.get.assert_called_once_with("user-123")

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: ProfileService, repo: AsyncMock):
        repo.get.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            await service.get("missing")

        assert exc_info.value.status_code == 404


class TestUpdate:
    @pytest.mark.asyncio
    async def test_applies_patch_and_bumps_updated_at(
        self, service: ProfileService, repo: AsyncMock, john: UserProfile
    ):
        repo.get.return_value = john

        result = await service.update("user-123", ProfilePatch(first_name="Jane"))

        assert result.first_name == "Jane"
        assert result.last_name == "Doe"
        assert result.updated_at != john.updated_at
        assert result.created_at == john.created_at
        repo.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_empty_patch_is_not_saved(
        self, service: ProfileService, repo: AsyncMock, john: UserProfile
    ):
        repo.get.return_value = john

        result = await service.update("user-123", ProfilePatch())

        assert result == john
        repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejects_blank_name(
        self, service: ProfileService, repo: AsyncMock, john: UserProfile
    ):
        repo.get.return_value = john

        with pytest.raises(ProfileValidationError) as exc_info:
            await service.update("user-123", ProfilePatch(last_name="   "))

        assert exc_info.value.status_code == 422
        assert exc_info.value.details == {"field": "last_name"}

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: ProfileService, repo: AsyncMock):
        repo.get.return_value = None

        with pytest.raises(AppException) as exc_info:
            await service.update("missing", ProfilePatch(first_name="Jane"))

        assert exc_info.value.status_code == 404
