"""Pydantic schemas for the User profile API.

Field names travel in camelCase on the wire (``firstName``, ``createdAt``)
and map onto the snake_case domain entities.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.entities.profile import ProfilePatch, UserProfile, UserRole


class CamelModel(BaseModel):
    """Base schema serializing with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserResponse(CamelModel):
    """Schema for a User profile response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "user-123",
                "email": "john.doe@example.com",
                "firstName": "John",
                "lastName": "Doe",
                "role": "user",
                "createdAt": "2025-01-01T00:00:00Z",
                "updatedAt": "2025-12-16T00:00:00Z",
            }
        },
    )

    id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole
    created_at: str
    updated_at: str
    bio: str | None = None
    avatar: str | None = None

    @classmethod
    def from_entity(cls, profile: UserProfile) -> "UserResponse":
        return cls(
            id=profile.id,
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            role=profile.role,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
            bio=profile.bio,
            avatar=profile.avatar,
        )

    def to_entity(self) -> UserProfile:
        return UserProfile(
            id=self.id,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            role=self.role,
            created_at=self.created_at,
            updated_at=self.updated_at,
            bio=self.bio,
            avatar=self.avatar,
        )


class UserUpdate(CamelModel):
    """Schema for partially updating a User profile."""

    model_config = ConfigDict(extra="forbid")

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    bio: str | None = Field(None, max_length=2000)
    avatar: str | None = Field(None, max_length=2048)

    def to_patch(self) -> ProfilePatch:
        return ProfilePatch(
            first_name=self.first_name,
            last_name=self.last_name,
            bio=self.bio,
            avatar=self.avatar,
        )
