"""Profile domain entities."""

import dataclasses
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any


class UserRole(StrEnum):
    """Closed set of roles a profile can carry."""

    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


@dataclass(frozen=True, slots=True)
class UserProfile:
    """Domain entity for a user profile.

    ``created_at`` and ``updated_at`` are opaque tokens issued by the
    profile service; the client never interprets them.
    """

    id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole = UserRole.USER
    created_at: str = ""
    updated_at: str = ""
    bio: str | None = None
    avatar: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def initials(self) -> str:
        """Avatar placeholder built from the first letters of both names."""
        return f"{self.first_name[:1]}{self.last_name[:1]}"


EDITABLE_FIELDS = ("first_name", "last_name", "bio", "avatar")


@dataclass(frozen=True, slots=True)
class ProfilePatch:
    """Partial update of the editable profile fields.

    ``None`` means "leave unchanged"; only set fields travel to the service.
    A patch therefore cannot reset ``bio`` or ``avatar`` to ``None``. Send an
    empty string to blank them instead, as the edit form does for ``bio``.
    """

    first_name: str | None = None
    last_name: str | None = None
    bio: str | None = None
    avatar: str | None = None

    def fields(self) -> dict[str, Any]:
        """Return the fields that were explicitly set."""
        values = {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        return {name: value for name, value in values.items() if value is not None}

    @property
    def is_empty(self) -> bool:
        return not self.fields()

    def apply_to(self, profile: UserProfile, updated_at: str) -> UserProfile:
        """Return a copy of ``profile`` with this patch applied."""
        return replace(profile, updated_at=updated_at, **self.fields())


@dataclass(frozen=True, slots=True)
class ProfileDraft:
    """Mutable-by-replacement edit buffer owned by the presentation layer."""

    values: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "ProfileDraft":
        return cls(
            values={
                "first_name": profile.first_name,
                "last_name": profile.last_name,
                "bio": profile.bio or "",
            }
        )

    def with_value(self, name: str, value: str) -> "ProfileDraft":
        if name not in EDITABLE_FIELDS:
            raise ValueError(f"Field is not editable: {name}")
        return ProfileDraft(values={**self.values, name: value})

    def to_patch(self) -> ProfilePatch:
        return ProfilePatch(**self.values)
