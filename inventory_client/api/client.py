"""Thin async HTTP wrapper that maps transport outcomes onto the error taxonomy."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from inventory_client.core.config import Settings, get_settings
from inventory_client.core.errors import LoadError, MutationError

logger = logging.getLogger(__name__)

USER_AGENT = "Inventory-Console/0.1"

# HTTP verb -> verb used in user-facing messages
MUTATION_ACTIONS = {"POST": "create", "PUT": "update", "DELETE": "delete"}


class ApiClient:
    """Owns one ``httpx.AsyncClient`` for the configured backend.

    Every non-2xx status and every transport failure is collapsed into
    ``LoadError`` (reads) or ``MutationError`` (writes).
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.base_url = base_url or settings.api_base_url
        self.timeout = timeout or settings.request_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Accept": "application/json", "User-Agent": USER_AGENT},
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def get_json(self, path: str, resource: str) -> Any:
        """GET ``path`` and return the decoded JSON body.

        Raises:
            LoadError: on timeout, connection failure, non-2xx status or
                a body that is not JSON.
        """
        start_time = time.monotonic()
        try:
            client = await self._get_client()
            response = await client.get(path)
        except httpx.TimeoutException as e:
            logger.warning(f"GET {path} timed out after {self.timeout}s: {e}")
            raise LoadError(resource, f"Request timeout after {self.timeout}s") from e
        except httpx.RequestError as e:
            logger.warning(f"GET {path} request error: {e}")
            raise LoadError(resource, f"Request failed: {e}") from e

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        if not response.is_success:
            logger.warning(
                f"GET {path} failed: status={response.status_code}, time={elapsed_ms}ms"
            )
            raise LoadError(
                resource,
                f"HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"GET {path} returned a non-JSON body")
            raise LoadError(resource, "Response body is not JSON") from e

        logger.debug(f"GET {path}: status={response.status_code}, time={elapsed_ms}ms")
        return data

    async def send(
        self,
        method: str,
        path: str,
        resource: str,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Issue a write request; the response body is not interpreted.

        Raises:
            MutationError: on timeout, connection failure or non-2xx status.
        """
        method = method.upper()
        action = MUTATION_ACTIONS.get(method, method.lower())
        try:
            client = await self._get_client()
            response = await client.request(method, path, json=payload)
        except httpx.TimeoutException as e:
            logger.warning(f"{method} {path} timed out after {self.timeout}s: {e}")
            raise MutationError(
                action, resource, f"Request timeout after {self.timeout}s"
            ) from e
        except httpx.RequestError as e:
            logger.warning(f"{method} {path} request error: {e}")
            raise MutationError(action, resource, f"Request failed: {e}") from e

        if not response.is_success:
            logger.warning(f"{method} {path} failed: status={response.status_code}")
            raise MutationError(
                action,
                resource,
                f"HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        logger.info(f"{method} {path}: status={response.status_code}")
        return response
