"""Remote profile service protocol."""

from typing import Protocol

from domain.entities.profile import ProfilePatch, UserProfile


class IProfileGateway(Protocol):
    """Client-side access to the authoritative profile service.

    Implementations raise ``core.exceptions.ProfileServiceError`` on failure
    and own their own timeouts.
    """

    async def fetch_profile(self, user_id: str) -> UserProfile:
        """Fetch the current profile for ``user_id``."""
        ...

    async def patch_profile(self, user_id: str, patch: ProfilePatch) -> UserProfile:
        """Apply ``patch`` and return the full authoritative profile."""
        ...
