"""Rendering-free view-model for a profile card with an edit form."""

from collections.abc import Callable
from enum import StrEnum

import structlog

from domain.entities.profile import ProfileDraft
from domain.entities.profile_state import ControllerState, ProfileSnapshot
from domain.services.profile_controller import ProfileController

logger = structlog.get_logger()


class ProfileView(StrEnum):
    """Which branch a renderer should draw."""

    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    PROFILE = "profile"


def view_for(snapshot: ProfileSnapshot) -> ProfileView:
    # A refetch keeps showing the last profile instead of a placeholder.
    if snapshot.loading and snapshot.profile is None:
        return ProfileView.LOADING
    if snapshot.error:
        return ProfileView.ERROR
    if snapshot.profile is None:
        return ProfileView.EMPTY
    return ProfileView.PROFILE


class ProfileEditForm:
    """Owns the edit draft and forwards user intent to the controller."""

    def __init__(
        self,
        controller: ProfileController,
        editable: bool = True,
        on_edit_toggle: Callable[[bool], None] | None = None,
    ) -> None:
        self._controller = controller
        self._editable = editable
        self._on_edit_toggle = on_edit_toggle
        self._draft = ProfileDraft()
        self._snapshot = controller.snapshot
        self._unsubscribe = controller.subscribe(self._on_snapshot)

    @property
    def snapshot(self) -> ProfileSnapshot:
        return self._snapshot

    @property
    def view(self) -> ProfileView:
        return view_for(self._snapshot)

    @property
    def draft(self) -> ProfileDraft:
        return self._draft

    @property
    def can_edit(self) -> bool:
        return self._editable and self._snapshot.profile is not None

    @property
    def can_submit(self) -> bool:
        return self._snapshot.editing and self._snapshot.state is not ControllerState.SUBMITTING

    def toggle_edit(self) -> None:
        """Enter or leave edit mode, pre-filling the draft on entry."""
        if not self.can_edit:
            return

        entering = not self._snapshot.editing
        if entering:
            self._controller.begin_edit()
            profile = self._snapshot.profile
            if not self._snapshot.editing or profile is None:
                return
            self._draft = ProfileDraft.from_profile(profile)
        else:
            self._controller.cancel_edit()
            if self._snapshot.editing:
                return
            self._draft = ProfileDraft()

        if self._on_edit_toggle is not None:
            self._on_edit_toggle(entering)

    def set_field(self, name: str, value: str) -> None:
        self._draft = self._draft.with_value(name, value)

    async def submit(self) -> None:
        if not self.can_submit:
            logger.debug("profile_form_submit_ignored", state=self._snapshot.state.value)
            return
        await self._controller.submit_edit(self._draft.to_patch())

    def dismiss_error(self) -> None:
        self._controller.dismiss_error()

    def close(self) -> None:
        self._unsubscribe()

    def _on_snapshot(self, snapshot: ProfileSnapshot) -> None:
        self._snapshot = snapshot
        if not snapshot.editing:
            self._draft = ProfileDraft()
