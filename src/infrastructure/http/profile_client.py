"""HTTP implementation of the remote profile service.

Speaks the ``GET /users/{id}`` and ``PATCH /users/{id}`` contract:

    GET   {base_url}/users/user-123
    PATCH {base_url}/users/user-123   {"firstName": "Jane"}

Both return the full user JSON on success. Non-success statuses are turned
into ``ProfileServiceError`` carrying the HTTP reason phrase, transport
failures into ``FailureKind.NETWORK``.
"""

from types import TracebackType
from typing import Any

import httpx
import structlog
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from api.v1.schemas.user import UserResponse
from core.config import settings
from core.exceptions import FailureKind, ProfileServiceError
from domain.entities.profile import ProfilePatch, UserProfile

logger = structlog.get_logger()


def failure_kind_for_status(status_code: int) -> FailureKind:
    """Map a non-success HTTP status onto a failure category."""
    if status_code == 404:
        return FailureKind.NOT_FOUND
    if status_code in (401, 403):
        return FailureKind.FORBIDDEN
    if status_code in (400, 409, 422):
        return FailureKind.VALIDATION
    return FailureKind.UNAVAILABLE


class HttpProfileGateway:
    """Profile gateway backed by ``httpx.AsyncClient``.

    Pass ``client`` to share a connection pool (or a test transport); a client
    created here is closed by ``aclose()`` / the async context manager.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        base_url = base_url or settings.profile_api_base_url
        timeout = settings.request_timeout_seconds if timeout is None else timeout
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._timeout = timeout

    async def fetch_profile(self, user_id: str) -> UserProfile:
        return await self._send("GET", user_id)

    async def patch_profile(self, user_id: str, patch: ProfilePatch) -> UserProfile:
        payload = {to_camel(name): value for name, value in patch.fields().items()}
        return await self._send("PATCH", user_id, payload)

    async def _send(
        self, method: str, user_id: str, payload: dict[str, Any] | None = None
    ) -> UserProfile:
        url = f"{self._base_url}/users/{user_id}"
        try:
            response = await self._client.request(
                method,
                url,
                json=payload,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            logger.warning("profile_request_timeout", method=method, url=url)
            raise ProfileServiceError(FailureKind.NETWORK, str(exc) or "Request timed out") from exc
        except httpx.TransportError as exc:
            logger.warning("profile_request_error", method=method, url=url, error=str(exc))
            raise ProfileServiceError(FailureKind.NETWORK, str(exc) or "Network error") from exc

        if not response.is_success:
            logger.info(
                "profile_request_rejected",
                method=method,
                url=url,
                status_code=response.status_code,
            )
            raise ProfileServiceError(
                failure_kind_for_status(response.status_code),
                message=f"HTTP {response.status_code} {response.reason_phrase}".strip(),
                status_code=response.status_code,
                status_text=response.reason_phrase or None,
            )

        try:
            return UserResponse.model_validate(response.json()).to_entity()
        except (ValueError, ValidationError) as exc:
            logger.warning("profile_response_malformed", method=method, url=url)
            raise ProfileServiceError(
                FailureKind.MALFORMED,
                message="Malformed profile response",
                status_code=response.status_code,
            ) from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpProfileGateway":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
