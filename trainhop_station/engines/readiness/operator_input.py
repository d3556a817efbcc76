"""Operator-supplied merge dates, for when the schedule service is down."""

from __future__ import annotations

from datetime import date
from typing import Protocol

BETA_START_DESCRIPTION = "Beta start date"
RELEASE_START_DESCRIPTION = (
    "Release start date (when current release version first merged to Beta)"
)


class DatePrompt(Protocol):
    """Asks a human for a calendar date.

    Implementations validate ``YYYY-MM-DD`` input themselves and return
    ``None`` only when the operator declines to answer.
    """

    async def request_date(self, description: str) -> date | None: ...


class DeclineDates:
    """Non-interactive prompt: never supplies a date."""

    async def request_date(self, description: str) -> date | None:
        return None


class FixedDates:
    """Answers prompts from dates given up front (e.g. command-line flags).

    Dates not given up front are asked of *fallback*, when there is one.
    """

    def __init__(
        self,
        beta_start: date | None = None,
        release_start: date | None = None,
        *,
        fallback: DatePrompt | None = None,
    ) -> None:
        self._answers = {
            BETA_START_DESCRIPTION: beta_start,
            RELEASE_START_DESCRIPTION: release_start,
        }
        self._fallback = fallback

    async def request_date(self, description: str) -> date | None:
        answer = self._answers.get(description)
        if answer is None and self._fallback is not None:
            return await self._fallback.request_date(description)
        return answer
