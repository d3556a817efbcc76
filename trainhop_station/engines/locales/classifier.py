"""Split each locale's untranslated strings into missing and pending."""

from __future__ import annotations

from datetime import date, timedelta
from urllib.parse import quote

import structlog
from pydantic import ValidationError

from trainhop_station.engines.locales.models import Classification, LocalesReport
from trainhop_station.errors import UpstreamUnavailable
from trainhop_station.upstream.github import GitHubClient

log = structlog.get_logger("trainhop_station.locales")

TRACKED_FTL = "browser/newtab/newtab.ftl"
LOCALES_REPORT_PATH = "browser/extensions/newtab/webext-glue/locales/locales-report.json"

# How long a string may sit on Beta before the Beta translation fallback
# is expected to have picked it up.
BETA_FALLBACK_THRESHOLD = timedelta(weeks=3)

_PONTOON_URL = (
    "https://pontoon.mozilla.org/{locale}/firefox/browser/browser/newtab/newtab.ftl/"
    "?search={key}&search_identifiers=true"
)


def is_missing(
    introduced: date | None,
    beta_start: date,
    release_start: date,
    today: date,
) -> bool:
    """Whether a string introduced on *introduced* blocks the train-hop.

    Strings older than the Release cycle are missing outright. Strings
    from the current Beta cycle only become missing once Beta has been
    running for at least three weeks (the merge day counts as day one,
    so the 22nd day is past the threshold). A string introduced between
    the two merge dates stays pending. A key with no known introduction
    date is treated as old.
    """
    if introduced is None:
        return True
    if introduced < release_start:
        return True
    return introduced >= beta_start and today - beta_start >= BETA_FALLBACK_THRESHOLD


def classify(
    report: LocalesReport,
    beta_start: date,
    release_start: date,
    *,
    today: date | None = None,
    tracked_file: str = TRACKED_FTL,
) -> dict[str, Classification]:
    """Classify the untranslated keys of *tracked_file* for every locale.

    Locales with nothing missing for the tracked file are left out.
    Key order from the report is preserved within each list.
    """
    today = today or date.today()
    result: dict[str, Classification] = {}
    for locale, entry in report.locales.items():
        keys = entry.missing.get(tracked_file)
        if not keys:
            continue
        classification = Classification()
        for key in keys:
            introduced = report.message_dates.get(key)
            if is_missing(introduced, beta_start, release_start, today):
                classification.missing.append(key)
            else:
                classification.pending.append(key)
        result[locale] = classification
    log.info(
        "locales.classified",
        locales=len(result),
        missing=sum(len(c.missing) for c in result.values()),
        pending=sum(len(c.pending) for c in result.values()),
    )
    return result


def pontoon_url(locale: str, key: str) -> str:
    """Link to the Pontoon search for *key* in *locale*'s newtab.ftl."""
    return _PONTOON_URL.format(locale=quote(locale), key=quote(key))


async def fetch_locales_report(github: GitHubClient, git_sha: str) -> LocalesReport:
    """Download and parse ``locales-report.json`` at *git_sha*."""
    text = await github.get_file_text(git_sha, LOCALES_REPORT_PATH)
    try:
        return LocalesReport.model_validate_json(text)
    except ValidationError as exc:
        raise UpstreamUnavailable(f"Malformed {LOCALES_REPORT_PATH}: {exc}") from exc
