"""Unit tests for profile entities."""

import pytest

from domain.entities.profile import ProfileDraft, ProfilePatch, UserProfile, UserRole


class TestUserProfile:
    def test_full_name_and_initials(self, john: UserProfile):
        assert john.full_name == "John Doe"
        assert john.initials == "JD"

    def test_role_parses_from_wire_value(self):
        assert UserRole("guest") is UserRole.GUEST


class TestProfilePatch:
    def test_fields_only_include_set_values(self):
        patch = ProfilePatch(first_name="Jane", bio="")

        assert patch.fields() == {"first_name": "Jane", "bio": ""}
        assert not patch.is_empty

    def test_empty_patch(self):
        assert ProfilePatch().is_empty

    def test_apply_to_replaces_fields_and_timestamp(self, john: UserProfile):
        updated = ProfilePatch(last_name="Smith").apply_to(john, updated_at="t2")

        assert updated.last_name == "Smith"
        assert updated.first_name == "John"
        assert updated.updated_at == "t2"
        assert updated.created_at == john.created_at

    def test_empty_string_blanks_optional_field(self, john: UserProfile):
        profile = ProfilePatch(bio="Hello", avatar="a.png").apply_to(john, updated_at="t2")

        blanked = ProfilePatch(bio="").apply_to(profile, updated_at="t3")
        untouched = ProfilePatch(bio=None).apply_to(profile, updated_at="t3")

        assert blanked.bio == ""
        assert blanked.avatar == "a.png"
        assert untouched.bio == "Hello"


class TestProfileDraft:
    def test_prefills_from_profile(self, john: UserProfile):
        draft = ProfileDraft.from_profile(john)

        assert draft.values == {"first_name": "John", "last_name": "Doe", "bio": ""}

    def test_with_value_returns_new_draft(self, john: UserProfile):
        draft = ProfileDraft.from_profile(john)

        changed = draft.with_value("first_name", "Jane")

        assert changed.values["first_name"] == "Jane"
        assert draft.values["first_name"] == "John"

    def test_rejects_non_editable_field(self):
        with pytest.raises(ValueError):
            ProfileDraft().with_value("email", "x@example.com")

    def test_to_patch(self, john: UserProfile):
        patch = ProfileDraft.from_profile(john).with_value("bio", "Hello").to_patch()

        assert patch == ProfilePatch(first_name="John", last_name="Doe", bio="Hello")
