"""Published controller state."""

from dataclasses import dataclass
from enum import StrEnum

from domain.entities.profile import UserProfile


class ControllerState(StrEnum):
    """Lifecycle states of a profile controller."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    EDITING = "editing"
    SUBMITTING = "submitting"
    FAILED = "failed"


class ProfileOperation(StrEnum):
    """Remote operation a failure message refers to."""

    FETCH = "fetch"
    UPDATE = "update"


@dataclass(frozen=True, slots=True)
class ProfileSnapshot:
    """Immutable view of controller state at a point in time."""

    profile: UserProfile | None = None
    loading: bool = False
    error: str | None = None
    editing: bool = False
    state: ControllerState = ControllerState.IDLE


EMPTY_SNAPSHOT = ProfileSnapshot()
