"""Per-platform status of the Beta and Release compatibility jobs."""

from __future__ import annotations

from trainhop_station.engines.ci.models import (
    TRAINHOP_JOB_SYMBOLS,
    JobRecord,
    JobStatus,
)


def job_status(job: JobRecord) -> JobStatus:
    if job.get("state") != "completed":
        return "unknown"
    result = job.get("result")
    if result == "success":
        return "passing"
    if result in (None, "unknown"):
        return "unknown"
    return "failing"


def summarize_jobs(jobs: list[JobRecord]) -> dict[str, dict[str, JobStatus]]:
    """Map platform -> trainhop job symbol -> passing/failing/unknown.

    Every platform that ran at least one trainhop job gets an entry for
    both symbols. When a job was retriggered, the one with the highest id
    decides.
    """
    latest: dict[tuple[str, str], JobRecord] = {}
    for job in jobs:
        symbol = job.get("job_type_symbol")
        platform = job.get("platform")
        if symbol not in TRAINHOP_JOB_SYMBOLS or not platform:
            continue
        key = (platform, symbol)
        current = latest.get(key)
        if current is None or (job.get("id") or 0) > (current.get("id") or 0):
            latest[key] = job

    summary: dict[str, dict[str, JobStatus]] = {}
    for platform, _symbol in sorted(latest):
        summary.setdefault(platform, {s: "unknown" for s in TRAINHOP_JOB_SYMBOLS})
    for (platform, symbol), job in latest.items():
        summary[platform][symbol] = job_status(job)
    return summary
