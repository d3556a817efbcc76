"""Async JSON API client shared by every upstream service."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from trainhop_station.errors import NotFoundError, UpstreamUnavailable

log = structlog.get_logger("trainhop_station.upstream")


class ApiClient:
    """Thin async wrapper around one upstream JSON API.

    Maps upstream failures onto the service error taxonomy in one place:
    404 becomes :class:`NotFoundError`, any other non-2xx status, transport
    failure or undecodable body becomes :class:`UpstreamUnavailable`.
    Requests are never retried.
    """

    def __init__(
        self,
        base_url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers or {},
            timeout=timeout,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────────

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET *path* (relative to the base URL) and return the parsed JSON body."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = await self._client.get(url, params=params)
        except httpx.TimeoutException as exc:
            log.warning("upstream.timeout", url=url)
            raise UpstreamUnavailable(f"Request to {url} timed out") from exc
        except httpx.TransportError as exc:
            log.warning("upstream.transport_error", url=url, error=str(exc))
            raise UpstreamUnavailable(f"Request to {url} failed: {exc}") from exc

        self._raise_for_status(response, url)

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamUnavailable(
                f"Invalid JSON from {url}", status=response.status_code
            ) from exc

    # ── internal ───────────────────────────────────────────────────────────

    @staticmethod
    def _raise_for_status(response: httpx.Response, url: str) -> None:
        status = response.status_code
        if status == 404:
            raise NotFoundError(f"{url} not found", status=status)
        if not response.is_success:
            log.warning("upstream.http_error", url=url, status=status)
            raise UpstreamUnavailable(f"Request to {url} failed: {status}", status=status)
