"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Keep the stub API store empty unless a test seeds it
os.environ.setdefault("SEED_DEMO_PROFILES", "false")

import pytest
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.entities.profile import UserProfile, UserRole
from infrastructure.memory.profile_repo import InMemoryProfileRepository


@pytest.fixture
def john() -> UserProfile:
    """The canonical test profile."""
    return UserProfile(
        id="user-123",
        email="john.doe@example.com",
        first_name="John",
        last_name="Doe",
        role=UserRole.USER,
        created_at="2025-01-01T00:00:00Z",
        updated_at="2025-12-16T00:00:00Z",
    )


@pytest.fixture
def repository(john: UserProfile) -> InMemoryProfileRepository:
    """Fresh profile store holding only ``john``."""
    return InMemoryProfileRepository([john])


@pytest.fixture
async def client(repository: InMemoryProfileRepository) -> AsyncGenerator[AsyncClient, None]:
    """Async test client for the stub profile API backed by ``repository``."""
    from api.v1.dependencies import get_profile_repository
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_profile_repository] = lambda: repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
