"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import UserProfile


class IProfileRepository(Protocol):
    """Repository interface for server-side profile storage."""

    async def get(self, user_id: str) -> UserProfile | None:
        """Get a profile by ID."""
        ...

    async def save(self, profile: UserProfile) -> UserProfile:
        """Insert or replace a profile."""
        ...
