"""Data models for the release schedule gateway."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class MergeDates:
    """Start dates of the versions currently on Beta and on Release.

    Each field is independently optional: ``None`` means the schedule
    service could not provide it and an operator has to.
    """

    beta_start: date | None = None
    release_start: date | None = None

    @property
    def complete(self) -> bool:
        return self.beta_start is not None and self.release_start is not None
