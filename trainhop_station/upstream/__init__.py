"""Upstream service clients (GitHub, Lando, Treeherder, release schedule, Nimbus)."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from trainhop_station.core.config import Settings
from trainhop_station.upstream.github import GitHubClient
from trainhop_station.upstream.http import ApiClient


@dataclass
class Upstreams:
    """One client per upstream service, sharing a lifecycle."""

    github: GitHubClient
    lando: ApiClient
    treeherder: ApiClient
    schedule: ApiClient
    nimbus: ApiClient

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> Upstreams:
        timeout = settings.http_timeout
        return cls(
            github=GitHubClient(
                settings.github_api,
                settings.github_token,
                timeout=timeout,
                transport=transport,
            ),
            lando=ApiClient(settings.lando_api, timeout=timeout, transport=transport),
            treeherder=ApiClient(settings.treeherder_api, timeout=timeout, transport=transport),
            schedule=ApiClient(settings.schedule_api, timeout=timeout, transport=transport),
            nimbus=ApiClient(settings.nimbus_api, timeout=timeout, transport=transport),
        )

    async def close(self) -> None:
        for client in (self.github, self.lando, self.treeherder, self.schedule, self.nimbus):
            await client.close()

    async def __aenter__(self) -> Upstreams:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()


__all__ = ["ApiClient", "GitHubClient", "Upstreams"]
