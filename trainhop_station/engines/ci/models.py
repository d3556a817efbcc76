"""Data models for the CI (Treeherder) aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

JobRecord = dict[str, Any]
JobStatus = Literal["passing", "failing", "unknown"]

BETA_JOB_SYMBOL = "Mbc-beta"
RELEASE_JOB_SYMBOL = "Mbc-release"
TRAINHOP_JOB_SYMBOLS = (BETA_JOB_SYMBOL, RELEASE_JOB_SYMBOL)


@dataclass
class PushAndJobs:
    """One Treeherder push and its train-hop compatibility jobs."""

    push: dict[str, Any]
    jobs: list[JobRecord] = field(default_factory=list)
    # platform -> job symbol -> status
    summary: dict[str, dict[str, JobStatus]] = field(default_factory=dict)

    @property
    def push_id(self) -> int | None:
        return self.push.get("id")
