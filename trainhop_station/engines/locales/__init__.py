"""Locales engine — newtab.ftl sync status and per-locale string classification."""

from trainhop_station.engines.locales.classifier import (
    BETA_FALLBACK_THRESHOLD,
    LOCALES_REPORT_PATH,
    TRACKED_FTL,
    classify,
    fetch_locales_report,
    is_missing,
    pontoon_url,
)
from trainhop_station.engines.locales.file_sync import (
    MAIN_FTL_PATH,
    WEBEXT_FTL_PATH,
    compare,
    fetch_file_info,
)
from trainhop_station.engines.locales.models import (
    Classification,
    FileInfo,
    LocaleEntry,
    LocalesReport,
    SyncVerdict,
)

__all__ = [
    "BETA_FALLBACK_THRESHOLD",
    "LOCALES_REPORT_PATH",
    "MAIN_FTL_PATH",
    "TRACKED_FTL",
    "WEBEXT_FTL_PATH",
    "Classification",
    "FileInfo",
    "LocaleEntry",
    "LocalesReport",
    "SyncVerdict",
    "classify",
    "compare",
    "fetch_file_info",
    "fetch_locales_report",
    "is_missing",
    "pontoon_url",
]
