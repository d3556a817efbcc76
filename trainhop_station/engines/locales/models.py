"""Data models for localization file sync and per-locale string status."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from trainhop_station.core.dates import parse_calendar_date

SyncStatus = Literal["in-sync", "main-newer", "webext-newer"]


@dataclass(frozen=True)
class FileInfo:
    """Last-modified timestamp of one tracked file at a revision."""

    path: str
    last_modified: datetime


@dataclass(frozen=True)
class SyncVerdict:
    """How the canonical newtab.ftl relates to its webext-glue copy."""

    status: SyncStatus
    day_delta: int
    message: str

    @property
    def blocking(self) -> bool:
        return self.status == "main-newer"


@dataclass
class Classification:
    """Missing keys of one locale, split into hard blockers and pending ones."""

    missing: list[str] = field(default_factory=list)
    pending: list[str] = field(default_factory=list)


class LocaleEntry(BaseModel):
    """One locale in ``locales-report.json``."""

    model_config = ConfigDict(extra="ignore")

    # tracked file path -> untranslated Fluent keys
    missing: dict[str, list[str]] = Field(default_factory=dict)


class LocalesReport(BaseModel):
    """The webext-glue ``locales-report.json`` document."""

    model_config = ConfigDict(extra="ignore")

    locales: dict[str, LocaleEntry] = Field(default_factory=dict)
    # Fluent key -> date the en-US string was introduced
    message_dates: dict[str, date] = Field(default_factory=dict)

    @field_validator("message_dates", mode="before")
    @classmethod
    def _calendar_dates(cls, value: object) -> object:
        if isinstance(value, dict):
            return {key: parse_calendar_date(raw) for key, raw in value.items()}
        return value
