"""Shared fixtures for unit tests."""

import asyncio
from collections.abc import Coroutine
from typing import Any

import pytest

from domain.entities.profile import ProfilePatch, UserProfile
from domain.entities.profile_state import ProfileSnapshot


class PendingCall:
    """A gateway call waiting for the test to settle it."""

    def __init__(self, operation: str, user_id: str, patch: ProfilePatch | None = None) -> None:
        self.operation = operation
        self.user_id = user_id
        self.patch = patch
        self.future: asyncio.Future[UserProfile] = asyncio.get_running_loop().create_future()

    def succeed(self, profile: UserProfile) -> None:
        self.future.set_result(profile)

    def fail(self, exc: Exception) -> None:
        self.future.set_exception(exc)


class FakeProfileGateway:
    """Gateway whose calls stay in flight until resolved by hand.

    Lets tests choose the order in which overlapping requests complete.
    """

    def __init__(self) -> None:
        self.calls: list[PendingCall] = []

    async def fetch_profile(self, user_id: str) -> UserProfile:
        call = PendingCall("fetch", user_id)
        self.calls.append(call)
        return await call.future

    async def patch_profile(self, user_id: str, patch: ProfilePatch) -> UserProfile:
        call = PendingCall("update", user_id, patch)
        self.calls.append(call)
        return await call.future

    def pending(self, operation: str, user_id: str | None = None) -> PendingCall:
        """Return the oldest unsettled call matching ``operation``/``user_id``."""
        for call in self.calls:
            if call.operation != operation or call.future.done():
                continue
            if user_id is None or call.user_id == user_id:
                return call
        raise AssertionError(f"No pending {operation} call for {user_id!r}")

    def count(self, operation: str) -> int:
        return sum(1 for call in self.calls if call.operation == operation)


class SnapshotRecorder:
    """Subscriber collecting every published snapshot."""

    def __init__(self) -> None:
        self.snapshots: list[ProfileSnapshot] = []

    def __call__(self, snapshot: ProfileSnapshot) -> None:
        self.snapshots.append(snapshot)

    @property
    def last(self) -> ProfileSnapshot:
        return self.snapshots[-1]


async def start(coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
    """Run ``coro`` as a task until it blocks on the gateway."""
    task = asyncio.create_task(coro)
    await asyncio.sleep(0)
    return task


@pytest.fixture
def gateway() -> FakeProfileGateway:
    """Create a fresh FakeProfileGateway."""
    return FakeProfileGateway()


@pytest.fixture
def recorder() -> SnapshotRecorder:
    return SnapshotRecorder()
