"""Controller keeping one displayed profile in sync with the profile service.

All state lives on a single asyncio event loop and is only mutated between
awaits, so the controller is the single writer of its own state. Every remote
call captures a generation token when it is issued; when the call settles the
token is compared with the controller's current generation and stale results
are dropped. The underlying request is never cancelled, its outcome is simply
ignored.
"""

from collections.abc import Callable

import structlog

from core.exceptions import ProfileServiceError
from domain.entities.profile import ProfilePatch, UserProfile
from domain.entities.profile_state import (
    EMPTY_SNAPSHOT,
    ControllerState,
    ProfileOperation,
    ProfileSnapshot,
)
from domain.repositories.profile_gateway import IProfileGateway

logger = structlog.get_logger()

SnapshotListener = Callable[[ProfileSnapshot], None]
UpdateListener = Callable[[UserProfile], None]

_IN_FLIGHT = (ControllerState.LOADING, ControllerState.SUBMITTING)


def describe_failure(operation: ProfileOperation, exc: Exception) -> str:
    """Build the human-readable error published for a failed operation."""
    if isinstance(exc, ProfileServiceError):
        if exc.status_text:
            return f"Failed to {operation} user: {exc.status_text}"
        message = exc.message
    else:
        message = str(exc)
    return message or f"Failed to {operation} user"


class ProfileController:
    """Owns the fetch/update lifecycle of a single bound profile."""

    def __init__(
        self,
        gateway: IProfileGateway,
        on_update: UpdateListener | None = None,
    ) -> None:
        self._gateway = gateway
        self._on_update = on_update
        self._listeners: list[SnapshotListener] = []

        self._user_id: str | None = None
        self._generation = 0
        # Identities with a PATCH still pending, stale or not.
        self._updates_in_flight: set[str] = set()
        self._state = ControllerState.IDLE
        self._profile: UserProfile | None = None
        self._error: str | None = None
        self._editing = False
        self._snapshot = EMPTY_SNAPSHOT

    @property
    def snapshot(self) -> ProfileSnapshot:
        return self._snapshot

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def user_id(self) -> str | None:
        return self._user_id

    # --- Subscriptions ---

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register ``listener`` and deliver the current snapshot immediately.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)
        self._deliver(listener, self._snapshot)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Operations ---

    async def bind(self, user_id: str) -> None:
        """Bind the controller to ``user_id`` and fetch its profile.

        Results still in flight for a previously bound identity are discarded
        when they arrive.
        """
        if user_id == self._user_id and self._state not in (
            ControllerState.IDLE,
            ControllerState.FAILED,
        ):
            logger.debug("profile_bind_ignored", user_id=user_id, state=self._state.value)
            return

        if self._user_id is not None and user_id != self._user_id:
            logger.info(
                "profile_identity_changed",
                previous_user_id=self._user_id,
                user_id=user_id,
            )

        self._user_id = user_id
        self._profile = None
        self._editing = False
        await self._fetch(user_id)

    async def refetch(self) -> None:
        """Re-issue the fetch for the bound identity, whatever the state."""
        if self._user_id is None:
            logger.debug("profile_refetch_ignored", reason="unbound")
            return
        await self._fetch(self._user_id)

    def unbind(self) -> None:
        """Forget the bound identity; late results are dropped."""
        self._generation += 1
        self._user_id = None
        self._profile = None
        self._editing = False
        self._transition(ControllerState.IDLE)

    def begin_edit(self) -> None:
        if self._state is not ControllerState.READY:
            logger.debug("profile_begin_edit_ignored", state=self._state.value)
            return
        self._editing = True
        self._transition(ControllerState.EDITING)

    def cancel_edit(self) -> None:
        if not self._editing or self._state is ControllerState.SUBMITTING:
            logger.debug("profile_cancel_edit_ignored", state=self._state.value)
            return
        self._editing = False
        if self._state is ControllerState.EDITING:
            self._transition(ControllerState.READY)
        else:
            self._publish()

    async def submit_edit(self, patch: ProfilePatch) -> None:
        """Send ``patch`` to the profile service.

        A no-op without a current profile, and refused while another update
        for the same identity is still pending. That holds even when the
        earlier update was superseded by a refetch and its result will be
        dropped.
        """
        if self._profile is None or self._user_id is None:
            logger.debug("profile_submit_ignored", reason="no_profile", state=self._state.value)
            return
        if self._user_id in self._updates_in_flight:
            logger.warning("profile_submit_rejected", reason="update_in_flight", user_id=self._user_id)
            return

        user_id = self._user_id
        generation = self._issue()
        self._transition(ControllerState.SUBMITTING)

        self._updates_in_flight.add(user_id)
        try:
            updated = await self._gateway.patch_profile(user_id, patch)
        except Exception as exc:
            if self._is_stale(generation, user_id, ProfileOperation.UPDATE):
                return
            message = describe_failure(ProfileOperation.UPDATE, exc)
            logger.warning("profile_update_failed", user_id=user_id, error=message)
            # The last known profile and the edit overlay are kept for a retry.
            self._transition(ControllerState.FAILED, error=message)
            return
        finally:
            self._updates_in_flight.discard(user_id)

        if self._is_stale(generation, user_id, ProfileOperation.UPDATE):
            return

        self._profile = updated
        self._editing = False
        self._transition(ControllerState.READY)
        logger.info("profile_updated", user_id=user_id, fields=sorted(patch.fields()))

        if self._on_update is not None:
            try:
                self._on_update(updated)
            except Exception:
                logger.exception("profile_update_listener_failed", user_id=user_id)

    def dismiss_error(self) -> None:
        if self._state is not ControllerState.FAILED:
            return
        if self._profile is None:
            self._editing = False
            self._transition(ControllerState.IDLE)
        elif self._editing:
            self._transition(ControllerState.EDITING)
        else:
            self._transition(ControllerState.READY)

    # --- Internals ---

    async def _fetch(self, user_id: str) -> None:
        generation = self._issue()
        self._transition(ControllerState.LOADING)

        try:
            profile = await self._gateway.fetch_profile(user_id)
        except Exception as exc:
            if self._is_stale(generation, user_id, ProfileOperation.FETCH):
                return
            message = describe_failure(ProfileOperation.FETCH, exc)
            logger.warning("profile_fetch_failed", user_id=user_id, error=message)
            self._profile = None
            self._editing = False
            self._transition(ControllerState.FAILED, error=message)
            return

        if self._is_stale(generation, user_id, ProfileOperation.FETCH):
            return

        self._profile = profile
        self._transition(ControllerState.EDITING if self._editing else ControllerState.READY)
        logger.debug("profile_fetched", user_id=user_id)

    def _issue(self) -> int:
        self._generation += 1
        return self._generation

    def _is_stale(self, generation: int, user_id: str, operation: ProfileOperation) -> bool:
        if generation == self._generation and user_id == self._user_id:
            return False
        logger.debug(
            "stale_result_discarded",
            operation=operation.value,
            user_id=user_id,
            generation=generation,
            current_generation=self._generation,
        )
        return True

    def _transition(self, state: ControllerState, error: str | None = None) -> None:
        self._state = state
        self._error = error
        self._publish()

    def _publish(self) -> None:
        snapshot = ProfileSnapshot(
            profile=self._profile,
            loading=self._state in _IN_FLIGHT,
            error=self._error,
            editing=self._editing,
            state=self._state,
        )
        if snapshot == self._snapshot:
            return
        self._snapshot = snapshot
        for listener in list(self._listeners):
            self._deliver(listener, snapshot)

    def _deliver(self, listener: SnapshotListener, snapshot: ProfileSnapshot) -> None:
        try:
            listener(snapshot)
        except Exception:
            logger.exception("profile_listener_failed", state=snapshot.state.value)
