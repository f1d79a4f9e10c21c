"""In-memory implementation of the profile repository."""

import asyncio
from collections.abc import Iterable

from domain.entities.profile import UserProfile


class InMemoryProfileRepository:
    """Process-local profile store used by the stub profile API."""

    def __init__(self, profiles: Iterable[UserProfile] = ()) -> None:
        self._profiles: dict[str, UserProfile] = {p.id: p for p in profiles}
        self._lock = asyncio.Lock()

    async def get(self, user_id: str) -> UserProfile | None:
        return self._profiles.get(user_id)

    async def save(self, profile: UserProfile) -> UserProfile:
        async with self._lock:
            self._profiles[profile.id] = profile
        return profile

    def __len__(self) -> int:
        return len(self._profiles)
