"""Beta/Release merge dates from the whattrainisitnow.com schedule API."""

from __future__ import annotations

import asyncio
from datetime import date, timedelta

import structlog

from trainhop_station.core.dates import parse_calendar_date
from trainhop_station.engines.schedule.models import MergeDates
from trainhop_station.errors import ServiceError, UpstreamUnavailable
from trainhop_station.upstream.http import ApiClient

log = structlog.get_logger("trainhop_station.schedule")


def monday_on_or_before(day: date) -> date:
    """Walk back to the Monday of *day*'s week (0 days if already Monday)."""
    delta = (day.isoweekday() + 6) % 7
    return day - timedelta(days=delta)


class ScheduleGateway:
    """Fetch merge dates, degrading each field to ``None`` on failure.

    The schedule API never publishes when the version now on Release was
    merged to Beta. The build date of its first beta (``beta_1``) is the
    proxy: that build happens during the merge week, so the Monday on or
    before it is taken as the release start date.
    """

    def __init__(self, schedule: ApiClient) -> None:
        self._schedule = schedule

    async def get_merge_dates(self) -> MergeDates:
        beta_start, release_start = await asyncio.gather(
            self._fetch_field("beta", "merge_day"),
            self._fetch_field("release", "beta_1"),
        )
        if release_start is not None:
            release_start = monday_on_or_before(release_start)
        return MergeDates(beta_start=beta_start, release_start=release_start)

    async def _fetch_field(self, version: str, field: str) -> date | None:
        try:
            data = await self._schedule.get_json("", params={"version": version})
            if not isinstance(data, dict):
                raise UpstreamUnavailable(f"unexpected {version} schedule payload")
            return parse_calendar_date(data.get(field))
        except (ServiceError, ValueError) as exc:
            log.warning(
                "schedule.fetch_failed",
                version=version,
                field=field,
                error=str(exc),
            )
            return None
