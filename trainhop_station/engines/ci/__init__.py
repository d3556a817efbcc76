"""CI engine — Treeherder push and train-hop job aggregation."""

from trainhop_station.engines.ci.aggregator import (
    TRAINHOP_JOB_GROUP,
    CiDataAggregator,
    transform_jobs,
)
from trainhop_station.engines.ci.models import PushAndJobs
from trainhop_station.engines.ci.summary import job_status, summarize_jobs

__all__ = [
    "TRAINHOP_JOB_GROUP",
    "CiDataAggregator",
    "PushAndJobs",
    "job_status",
    "summarize_jobs",
    "transform_jobs",
]
