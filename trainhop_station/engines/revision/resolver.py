"""Git <-> Mercurial identifier translation through Lando, with a write-once cache."""

from __future__ import annotations

import structlog

from trainhop_station.engines.revision.cache import IdentifierCache
from trainhop_station.engines.revision.models import Direction
from trainhop_station.errors import ConversionError, ServiceError
from trainhop_station.upstream.http import ApiClient

log = structlog.get_logger("trainhop_station.revision")

_REPOSITORY = "firefox"


def cache_key(direction: Direction, sha: str) -> str:
    return f"{direction.value}:{sha}"


class IdentifierResolver:
    """Translate a commit identifier into the other namespace.

    Every successful translation is written to *cache* before it is
    returned, so each ``(direction, sha)`` pair hits the network at most
    once for the lifetime of the cache.
    """

    def __init__(self, lando: ApiClient, cache: IdentifierCache) -> None:
        self._lando = lando
        self._cache = cache

    async def resolve(self, direction: Direction, sha: str) -> str:
        key = cache_key(direction, sha)
        cached = self._cache.get(key)
        if cached:
            log.debug("resolver.cache_hit", key=key)
            return cached

        try:
            data = await self._lando.get_json(f"{direction.value}/{_REPOSITORY}/{sha}")
        except ServiceError as exc:
            raise ConversionError(
                f"Failed to convert {direction.description}: {exc.status or exc}",
                status=exc.status,
            ) from exc

        resolved = data.get(direction.response_field) if isinstance(data, dict) else None
        if not resolved:
            raise ConversionError(
                f"Failed to convert {direction.description}: "
                f"no {direction.response_field} in response"
            )

        self._cache.set(key, resolved)
        log.info("resolver.resolved", direction=direction.value, source=sha, result=resolved)
        return resolved

    async def git_to_hg(self, git_sha: str) -> str:
        return await self.resolve(Direction.GIT_TO_HG, git_sha)

    async def hg_to_git(self, hg_sha: str) -> str:
        return await self.resolve(Direction.HG_TO_GIT, hg_sha)
