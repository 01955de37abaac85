"""HTTP client for the FunFood backend."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from funfood.domain.exceptions import RemoteFailure

logger = logging.getLogger("funfood.api")

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE"})


class ApiClient:
    """Thin async wrapper around ``httpx.AsyncClient``.

    Adds the bearer token from ``token_provider`` to every request and turns
    transport and HTTP errors into ``RemoteFailure``. Transport errors
    (timeouts, refused connections) are retried with exponential backoff for
    idempotent methods only; a POST is sent once, since the server may have
    applied it even when the response was lost. A 401 response triggers
    ``on_unauthorized`` before the failure is raised.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        retry_attempts: int = 3,
        token_provider: Callable[[], str | None] | None = None,
        on_unauthorized: Callable[[], Awaitable[None]] | None = None,
        retry_backoff: float = 0.5,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.retry_attempts = max(retry_attempts, 1)
        self.token_provider = token_provider
        self.on_unauthorized = on_unauthorized
        self.retry_backoff = retry_backoff
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    def _headers(self) -> dict[str, str]:
        token = self.token_provider() if self.token_provider else None
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            RemoteFailure: On transport errors, non-2xx responses or
                undecodable bodies
        """
        attempts = self.retry_attempts if method.upper() in IDEMPOTENT_METHODS else 1
        last_error: Exception | None = None
        for attempt in range(attempts):
            try:
                response = await self._client.request(
                    method, path, params=params, json=json, headers=self._headers()
                )
                response.raise_for_status()
                return response.json() if response.content else None
            except httpx.TransportError as e:
                last_error = e
                logger.warning(f"[API] {method} {path} attempt {attempt + 1} failed: {e!r}")
                if attempt < attempts - 1:
                    await asyncio.sleep(self.retry_backoff * 2 ** attempt)
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                if status == 401:
                    logger.warning(f"[API] {method} {path} unauthorized")
                    await self._handle_unauthorized()
                raise RemoteFailure(_error_message(e.response), status_code=status) from e
            except ValueError as e:
                raise RemoteFailure(f"Invalid JSON from {method} {path}: {e}") from e

        raise RemoteFailure(f"{method} {path} failed: {last_error!r}") from last_error

    async def _handle_unauthorized(self) -> None:
        if self.on_unauthorized is None:
            return
        try:
            await self.on_unauthorized()
        except Exception as e:
            logger.error(f"[API] Unauthorized handler failed: {e}")

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {response.status_code}"
