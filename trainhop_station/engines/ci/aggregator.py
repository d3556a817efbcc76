"""Push and train-hop job lookup against the Treeherder API."""

from __future__ import annotations

from typing import Any

import structlog

from trainhop_station.engines.ci.models import JobRecord, PushAndJobs
from trainhop_station.engines.ci.summary import summarize_jobs
from trainhop_station.errors import NotFoundError, UpstreamUnavailable
from trainhop_station.upstream.http import ApiClient

log = structlog.get_logger("trainhop_station.ci")

TRAINHOP_JOB_GROUP = "nt-trainhop"
_PROJECT = "mozilla-central"


def transform_jobs(payload: dict[str, Any]) -> list[JobRecord]:
    """Rebuild named job records from Treeherder's columnar jobs payload.

    The payload carries one ``job_property_names`` list and one positional
    row per job in ``results``. A row whose length differs from the name
    list is a malformed payload.
    """
    rows = payload.get("results")
    names = payload.get("job_property_names")
    if not rows or not names:
        return []
    if not isinstance(rows, list) or not isinstance(names, list):
        raise UpstreamUnavailable("jobs payload is not in columnar form")

    jobs: list[JobRecord] = []
    for index, row in enumerate(rows):
        if not isinstance(row, (list, tuple)):
            raise UpstreamUnavailable(f"job row {index} is not a list")
        if len(row) != len(names):
            raise UpstreamUnavailable(
                f"job row {index} has {len(row)} values for {len(names)} property names"
            )
        jobs.append(dict(zip(names, row)))
    return jobs


class CiDataAggregator:
    """Find the push for a Mercurial SHA and collect its train-hop jobs."""

    def __init__(self, treeherder: ApiClient) -> None:
        self._treeherder = treeherder

    async def get_push_and_jobs(self, hg_sha: str) -> PushAndJobs:
        push_payload = await self._treeherder.get_json(
            f"project/{_PROJECT}/push/",
            params={"full": "true", "count": 10, "revision": hg_sha},
        )
        if not isinstance(push_payload, dict):
            raise UpstreamUnavailable(f"Unexpected push payload for {hg_sha}")
        pushes = push_payload.get("results")
        if not pushes:
            raise NotFoundError(f"No push data found for Mercurial SHA: {hg_sha}")
        if not isinstance(pushes, list) or not isinstance(pushes[0], dict):
            raise UpstreamUnavailable(f"Unexpected push payload for {hg_sha}")
        push = pushes[0]
        if push.get("id") is None:
            raise UpstreamUnavailable(f"Push for {hg_sha} has no id")

        jobs_payload = await self._treeherder.get_json(
            "jobs/",
            params={"job_group_symbol": TRAINHOP_JOB_GROUP, "push_id": push["id"]},
        )
        jobs = transform_jobs(jobs_payload if isinstance(jobs_payload, dict) else {})
        log.info("ci.jobs_collected", push_id=push["id"], jobs=len(jobs))
        return PushAndJobs(push=push, jobs=jobs, summary=summarize_jobs(jobs))
