"""Data models for a revision readiness assessment."""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, field, replace
from typing import Any

from trainhop_station.engines.ci.models import PushAndJobs
from trainhop_station.engines.locales.models import Classification, SyncVerdict
from trainhop_station.engines.revision.models import ShaKind
from trainhop_station.engines.rollouts.models import Rollout
from trainhop_station.engines.schedule.models import MergeDates
from trainhop_station.errors import ServiceError


class ReadinessStatus(str, enum.Enum):
    READY = "ready"
    ERROR = "error"
    DATES_REQUIRED = "dates_required"


@dataclass
class ReadinessResult:
    """Outcome of one assessment.

    On ``ERROR`` and ``DATES_REQUIRED`` the identifiers resolved so far are
    still reported, with ``error`` holding the human-readable reason and
    ``failed_branch`` naming the step that failed.
    ``rollouts`` is None when Nimbus could not be reached.
    """

    status: ReadinessStatus
    git_sha: str | None = None
    hg_sha: str | None = None
    input_kind: ShaKind = ShaKind.GIT
    push_and_jobs: PushAndJobs | None = None
    file_sync: SyncVerdict | None = None
    locales: dict[str, Classification] | None = None
    merge_dates: MergeDates = field(default_factory=MergeDates)
    rollouts: list[Rollout] | None = None
    error: str | None = None
    failed_branch: str | None = None
    failure: ServiceError | None = field(default=None, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return self.status is ReadinessStatus.READY

    @property
    def trainhop_blocked(self) -> bool:
        """The packaged newtab.ftl is stale, or some locale has missing strings."""
        if self.file_sync is not None and self.file_sync.blocking:
            return True
        return any(c.missing for c in (self.locales or {}).values())

    @property
    def status_message(self) -> str:
        if self.status is ReadinessStatus.READY:
            return "Ready for implementation"
        return f"Error: {self.error}"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view with derived fields; dates are left as date objects."""
        data = asdict(replace(self, failure=None))
        data.pop("failure")
        data["status"] = self.status.value
        data["input_kind"] = self.input_kind.value
        data["status_message"] = self.status_message
        data["trainhop_blocked"] = self.trainhop_blocked
        if self.file_sync is not None:
            data["file_sync"]["blocking"] = self.file_sync.blocking
        for item, rollout in zip(data["rollouts"] or [], self.rollouts or []):
            item["url"] = rollout.url
        return data
