"""Revision readiness orchestrator — one verdict from all upstream data."""

from __future__ import annotations

import asyncio
from datetime import date

import structlog

from trainhop_station.engines.ci.aggregator import CiDataAggregator
from trainhop_station.engines.locales.classifier import classify, fetch_locales_report
from trainhop_station.engines.locales.file_sync import (
    MAIN_FTL_PATH,
    WEBEXT_FTL_PATH,
    compare,
    fetch_file_info,
)
from trainhop_station.engines.readiness.models import ReadinessResult, ReadinessStatus
from trainhop_station.engines.readiness.operator_input import (
    BETA_START_DESCRIPTION,
    RELEASE_START_DESCRIPTION,
    DatePrompt,
)
from trainhop_station.engines.revision.cache import IdentifierCache
from trainhop_station.engines.revision.models import RevisionIds, ShaKind
from trainhop_station.engines.revision.resolver import IdentifierResolver
from trainhop_station.engines.revision.validator import RevisionValidator
from trainhop_station.engines.rollouts.models import Rollout
from trainhop_station.engines.rollouts.report import fetch_rollouts
from trainhop_station.engines.schedule.gateway import ScheduleGateway
from trainhop_station.errors import MissingInputError, ServiceError
from trainhop_station.upstream import Upstreams
from trainhop_station.upstream.github import GitHubClient
from trainhop_station.upstream.http import ApiClient

log = structlog.get_logger("trainhop_station.readiness")

_BRANCHES = [
    "push_data",
    "main_ftl_info",
    "webext_ftl_info",
    "locales_report",
    "merge_dates",
    "rollouts",
]


class RevisionReadinessOrchestrator:
    """Compose validation, CI, locales, schedule and rollout data.

    Service failures never escape :meth:`assess_readiness`; they come back
    as a ``ReadinessResult`` in the ``ERROR`` state. Anything else is a bug
    and propagates.
    """

    def __init__(
        self,
        validator: RevisionValidator,
        aggregator: CiDataAggregator,
        github: GitHubClient,
        schedule: ScheduleGateway,
        nimbus: ApiClient,
        operator: DatePrompt,
        *,
        today: date | None = None,
    ) -> None:
        self._validator = validator
        self._aggregator = aggregator
        self._github = github
        self._schedule = schedule
        self._nimbus = nimbus
        self._operator = operator
        self._today = today

    @classmethod
    def from_upstreams(
        cls,
        upstreams: Upstreams,
        cache: IdentifierCache,
        operator: DatePrompt,
        *,
        today: date | None = None,
    ) -> RevisionReadinessOrchestrator:
        resolver = IdentifierResolver(upstreams.lando, cache)
        return cls(
            validator=RevisionValidator(upstreams.github, resolver),
            aggregator=CiDataAggregator(upstreams.treeherder),
            github=upstreams.github,
            schedule=ScheduleGateway(upstreams.schedule),
            nimbus=upstreams.nimbus,
            operator=operator,
            today=today,
        )

    async def assess_readiness(self, raw_input: str, input_kind: ShaKind) -> ReadinessResult:
        raw_input = (raw_input or "").strip()
        structlog.contextvars.bind_contextvars(revision=raw_input or "latest")
        try:
            return await self._assess(raw_input, input_kind)
        finally:
            structlog.contextvars.unbind_contextvars("revision")

    async def _assess(self, raw_input: str, input_kind: ShaKind) -> ReadinessResult:
        # 1. identifiers
        try:
            ids = await self._validator.resolve_target(raw_input, input_kind)
        except ServiceError as exc:
            exc.branch = "revision"
            log.error("readiness.branch_failed", branch="revision", error=str(exc))
            partial = exc.ids or RevisionIds(
                git_sha=raw_input if input_kind is ShaKind.GIT and raw_input else None,
                hg_sha=raw_input if input_kind is ShaKind.HG and raw_input else None,
                input_kind=input_kind,
            )
            return ReadinessResult(
                status=ReadinessStatus.ERROR,
                git_sha=partial.git_sha,
                hg_sha=partial.hg_sha,
                input_kind=partial.input_kind,
                error=str(exc),
                failed_branch="revision",
                failure=exc,
            )

        result = ReadinessResult(
            status=ReadinessStatus.READY,
            git_sha=ids.git_sha,
            hg_sha=ids.hg_sha,
            input_kind=ids.input_kind,
        )

        # 2. independent fetches
        settled = await asyncio.gather(
            self._aggregator.get_push_and_jobs(ids.hg_sha),
            fetch_file_info(self._github, ids.git_sha, MAIN_FTL_PATH),
            fetch_file_info(self._github, ids.git_sha, WEBEXT_FTL_PATH),
            fetch_locales_report(self._github, ids.git_sha),
            self._schedule.get_merge_dates(),
            self._fetch_rollouts(),
            return_exceptions=True,
        )
        for name, outcome in zip(_BRANCHES, settled, strict=True):
            if isinstance(outcome, ServiceError):
                outcome.branch = name
                log.error("readiness.branch_failed", branch=name, error=str(outcome))
                result.status = ReadinessStatus.ERROR
                result.error = str(outcome)
                result.failed_branch = name
                result.failure = outcome
                return result
            if isinstance(outcome, BaseException):
                raise outcome

        push_and_jobs, main_info, webext_info, report, merge_dates, rollouts = settled
        result.push_and_jobs = push_and_jobs
        result.file_sync = compare(main_info, webext_info)
        result.merge_dates = merge_dates
        result.rollouts = rollouts

        # 3. operator fallback for merge dates
        if merge_dates.beta_start is None:
            merge_dates.beta_start = await self._operator.request_date(BETA_START_DESCRIPTION)
            if merge_dates.beta_start is None:
                return self._dates_required(result, "Beta start date")
        if merge_dates.release_start is None:
            merge_dates.release_start = await self._operator.request_date(
                RELEASE_START_DESCRIPTION
            )
            if merge_dates.release_start is None:
                return self._dates_required(result, "Release start date")

        # 4. locales
        result.locales = classify(
            report,
            merge_dates.beta_start,
            merge_dates.release_start,
            today=self._today,
        )
        log.info(
            "readiness.assessed",
            git_sha=ids.git_sha,
            hg_sha=ids.hg_sha,
            file_sync=result.file_sync.status,
            blocked=result.trainhop_blocked,
        )
        return result

    async def _fetch_rollouts(self) -> list[Rollout] | None:
        # degrades to None, like the schedule lookups
        try:
            return await fetch_rollouts(self._nimbus)
        except ServiceError as exc:
            log.warning("rollouts.fetch_failed", error=str(exc))
            return None

    @staticmethod
    def _dates_required(result: ReadinessResult, what: str) -> ReadinessResult:
        exc = MissingInputError(f"{what} required for locales analysis", branch="merge_dates")
        log.warning("readiness.dates_required", missing=what)
        result.status = ReadinessStatus.DATES_REQUIRED
        result.error = str(exc)
        result.failed_branch = exc.branch
        result.failure = exc
        return result
