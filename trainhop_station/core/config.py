"""Runtime settings, read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_DEFAULT_GITHUB_API = "https://api.github.com/repos/mozilla-firefox/firefox"
_DEFAULT_LANDO_API = "https://lando.moz.tools/api"
_DEFAULT_TREEHERDER_API = "https://treeherder.mozilla.org/api"
_DEFAULT_SCHEDULE_API = "https://whattrainisitnow.com/api/release/schedule"
_DEFAULT_NIMBUS_API = "https://experimenter.services.mozilla.com/api/v6"
_DEFAULT_CACHE_PATH = "~/.cache/trainhop-station/sha-cache.json"


def _env_float(key: str, default: float) -> float:
    return float(os.environ.get(key, default))


@dataclass(frozen=True)
class Settings:
    """Upstream endpoints and local paths used by one assessment."""

    github_api: str = _DEFAULT_GITHUB_API
    github_token: str | None = None
    lando_api: str = _DEFAULT_LANDO_API
    treeherder_api: str = _DEFAULT_TREEHERDER_API
    schedule_api: str = _DEFAULT_SCHEDULE_API
    nimbus_api: str = _DEFAULT_NIMBUS_API
    cache_path: Path = Path(_DEFAULT_CACHE_PATH).expanduser()
    http_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            github_api=os.environ.get("TRAINHOP_GITHUB_API", _DEFAULT_GITHUB_API),
            github_token=os.environ.get("GITHUB_TOKEN") or None,
            lando_api=os.environ.get("TRAINHOP_LANDO_API", _DEFAULT_LANDO_API),
            treeherder_api=os.environ.get("TRAINHOP_TREEHERDER_API", _DEFAULT_TREEHERDER_API),
            schedule_api=os.environ.get("TRAINHOP_SCHEDULE_API", _DEFAULT_SCHEDULE_API),
            nimbus_api=os.environ.get("TRAINHOP_NIMBUS_API", _DEFAULT_NIMBUS_API),
            cache_path=Path(
                os.environ.get("TRAINHOP_CACHE_PATH", _DEFAULT_CACHE_PATH)
            ).expanduser(),
            http_timeout=_env_float("TRAINHOP_HTTP_TIMEOUT", 30.0),
        )
