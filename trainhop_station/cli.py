"""CLI entry point: trainhop-check.

Usage:
    trainhop-check                          # latest mozilla-central commit
    trainhop-check 1a2b3c4d --kind hg       # a Mercurial revision
    trainhop-check 9f8e7d6c --kind git      # a Git revision
"""

from __future__ import annotations

import asyncio
import json
import sys
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path

import click
from dotenv import load_dotenv

from trainhop_station.core.config import Settings
from trainhop_station.core.dates import parse_operator_date
from trainhop_station.core.logging import setup_logging
from trainhop_station.engines.readiness import (
    DatePrompt,
    DeclineDates,
    FixedDates,
    ReadinessResult,
    ReadinessStatus,
    RevisionReadinessOrchestrator,
)
from trainhop_station.engines.revision import JsonFileCache, ShaKind
from trainhop_station.upstream import Upstreams

_EXIT_CODES = {
    ReadinessStatus.READY: 0,
    ReadinessStatus.ERROR: 1,
    ReadinessStatus.DATES_REQUIRED: 2,
}


class ClickDatePrompt:
    """Ask on the terminal until a valid YYYY-MM-DD or an empty answer."""

    async def request_date(self, description: str) -> date | None:
        while True:
            answer = click.prompt(
                f"Failed to fetch {description} automatically. "
                f"Please enter the {description} (YYYY-MM-DD, empty to cancel)",
                default="",
                show_default=False,
                err=True,
            )
            if not answer.strip():
                return None
            parsed = parse_operator_date(answer)
            if parsed is not None:
                return parsed
            click.echo(
                "Invalid date format. Please use YYYY-MM-DD format (e.g., 2024-01-15).",
                err=True,
            )


def _json_default(value: object) -> str:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def _date_option(_ctx: click.Context, _param: click.Parameter, value: str | None) -> date | None:
    if value is None:
        return None
    parsed = parse_operator_date(value)
    if parsed is None:
        raise click.BadParameter("expected a calendar date as YYYY-MM-DD")
    return parsed


def _interactive(no_input: bool) -> bool:
    return not no_input and sys.stdin.isatty()


async def _run(
    settings: Settings,
    revision: str,
    kind: ShaKind,
    operator: DatePrompt,
) -> ReadinessResult:
    cache = JsonFileCache(settings.cache_path)
    async with Upstreams.from_settings(settings) as upstreams:
        orchestrator = RevisionReadinessOrchestrator.from_upstreams(upstreams, cache, operator)
        return await orchestrator.assess_readiness(revision, kind)


@click.command()
@click.argument("revision", required=False, default="")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in ShaKind]),
    default=ShaKind.HG.value,
    show_default=True,
    help="Namespace of REVISION: Mercurial (hg) or Git (git).",
)
@click.option(
    "--cache",
    "cache_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="SHA translation cache file (default: $TRAINHOP_CACHE_PATH).",
)
@click.option("--beta-start", callback=_date_option, help="Beta merge date, YYYY-MM-DD.")
@click.option("--release-start", callback=_date_option, help="Release merge date, YYYY-MM-DD.")
@click.option("--no-input", is_flag=True, help="Never prompt for missing merge dates.")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    revision: str,
    kind: str,
    cache_path: Path | None,
    beta_start: date | None,
    release_start: date | None,
    no_input: bool,
    verbose: bool,
) -> None:
    """Check whether a Firefox revision is ready to train-hop New Tab.

    Leave REVISION empty to check the latest commit. Prints the assessment
    as JSON; exits 0 when ready, 1 on error, 2 when merge dates are needed.
    """
    load_dotenv(Path.cwd() / ".env")
    setup_logging("DEBUG" if verbose else None)

    settings = Settings.from_env()
    if cache_path is not None:
        settings = replace(settings, cache_path=cache_path)

    prompt: DatePrompt = ClickDatePrompt() if _interactive(no_input) else DeclineDates()
    operator: DatePrompt = prompt
    if beta_start or release_start:
        operator = FixedDates(beta_start, release_start, fallback=prompt)

    result = asyncio.run(_run(settings, revision, ShaKind(kind), operator))
    click.echo(json.dumps(result.to_dict(), indent=2, default=_json_default))
    if not result.ok:
        click.echo(result.status_message, err=True)
    sys.exit(_EXIT_CODES[result.status])


if __name__ == "__main__":
    main()
