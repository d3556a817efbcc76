"""Compare the canonical newtab.ftl with the copy packaged in the newtab XPI."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

import structlog

from trainhop_station.engines.locales.models import FileInfo, SyncVerdict
from trainhop_station.errors import UpstreamUnavailable
from trainhop_station.upstream.github import GitHubClient

log = structlog.get_logger("trainhop_station.locales")

MAIN_FTL_PATH = "browser/locales/en-US/browser/newtab/newtab.ftl"
WEBEXT_FTL_PATH = (
    "browser/extensions/newtab/webext-glue/locales/en-US/browser/newtab/newtab.ftl"
)

_ONE_DAY = timedelta(days=1)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def compare(main: FileInfo, secondary: FileInfo) -> SyncVerdict:
    """Classify how many whole days *main* is ahead of (or behind) *secondary*.

    The status follows the rounded day delta, so two edits a few hours
    apart on the same day are in sync.
    """
    day_delta = _round_half_away((main.last_modified - secondary.last_modified) / _ONE_DAY)

    if day_delta > 0:
        return SyncVerdict(
            status="main-newer",
            day_delta=day_delta,
            message=f"Main newtab.ftl is {day_delta} day(s) newer than webext-glue version",
        )
    if day_delta < 0:
        return SyncVerdict(
            status="webext-newer",
            day_delta=day_delta,
            message=(
                f"Webext-glue newtab.ftl is {abs(day_delta)} day(s) newer than main version"
            ),
        )
    return SyncVerdict(status="in-sync", day_delta=0, message="Files are in sync")


async def fetch_file_info(github: GitHubClient, git_sha: str, path: str) -> FileInfo:
    """Last-modified time of *path* = author date of the latest commit touching it."""
    commit = await github.last_commit_for_path(git_sha, path)
    try:
        raw = commit["commit"]["author"]["date"]
        last_modified = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except (KeyError, TypeError, AttributeError, ValueError) as exc:
        raise UpstreamUnavailable(f"No author date in history of {path}") from exc
    log.debug("locales.file_info", path=path, last_modified=last_modified.isoformat())
    return FileInfo(path=path, last_modified=last_modified)
