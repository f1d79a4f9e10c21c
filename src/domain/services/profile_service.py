"""Profile service layer backing the stub profile API."""

from datetime import datetime, timezone

import structlog

from core.exceptions import ProfileValidationError, UserNotFoundError
from domain.entities.profile import ProfilePatch, UserProfile
from domain.repositories.profile_repository import IProfileRepository

logger = structlog.get_logger()


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ProfileService:
    """Service layer for profile reads and partial updates."""

    def __init__(self, repository: IProfileRepository) -> None:
        self._repository = repository

    async def get(self, user_id: str) -> UserProfile:
        """Get a profile, raising if it does not exist."""
        profile = await self._repository.get(user_id)
        if profile is None:
            raise UserNotFoundError(user_id)
        return profile

    async def update(self, user_id: str, patch: ProfilePatch) -> UserProfile:
        """Apply a partial update and return the full stored profile."""
        profile = await self.get(user_id)

        for name in ("first_name", "last_name"):
            value = getattr(patch, name)
            if value is not None and not value.strip():
                raise ProfileValidationError(f"{name} must not be blank", field=name)

        if patch.is_empty:
            return profile

        updated = await self._repository.save(patch.apply_to(profile, updated_at=_timestamp()))
        logger.info("profile_saved", user_id=user_id, fields=sorted(patch.fields()))
        return updated
