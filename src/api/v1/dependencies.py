"""Dependency injection factories for API v1."""

from functools import lru_cache

from fastapi import Depends

from core.config import settings
from domain.entities.profile import UserProfile, UserRole
from domain.services.profile_service import ProfileService
from infrastructure.memory.profile_repo import InMemoryProfileRepository

DEMO_PROFILES = (
    UserProfile(
        id="user-123",
        email="john.doe@example.com",
        first_name="John",
        last_name="Doe",
        role=UserRole.USER,
        created_at="2025-01-01T00:00:00Z",
        updated_at="2025-12-16T00:00:00Z",
    ),
    UserProfile(
        id="admin-1",
        email="ada@example.com",
        first_name="Ada",
        last_name="Lovelace",
        role=UserRole.ADMIN,
        created_at="2025-01-01T00:00:00Z",
        updated_at="2025-01-01T00:00:00Z",
        bio="Keeps the lights on.",
    ),
)


@lru_cache
def get_profile_repository() -> InMemoryProfileRepository:
    """Get the process-wide profile store."""
    return InMemoryProfileRepository(DEMO_PROFILES if settings.seed_demo_profiles else ())


def get_profile_service(
    repository: InMemoryProfileRepository = Depends(get_profile_repository),
) -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(repository)
