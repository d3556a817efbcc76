"""Tests for the trainhop-check command (upstreams mocked out)."""

from __future__ import annotations

import asyncio
import json
from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from click.testing import CliRunner

from trainhop_station.cli import ClickDatePrompt, main
from trainhop_station.engines.readiness import (
    BETA_START_DESCRIPTION,
    RELEASE_START_DESCRIPTION,
    DeclineDates,
    FixedDates,
    ReadinessResult,
    ReadinessStatus,
)
from trainhop_station.engines.revision import ShaKind
from trainhop_station.engines.schedule import MergeDates
from trainhop_station.errors import MissingInputError


def _invoke(args, result: ReadinessResult):
    run = AsyncMock(return_value=result)
    with patch("trainhop_station.cli._run", run), patch(
        "trainhop_station.cli.setup_logging"
    ), patch("trainhop_station.cli.load_dotenv"):
        outcome = CliRunner().invoke(main, args)
    return outcome, run


def _ready() -> ReadinessResult:
    return ReadinessResult(
        status=ReadinessStatus.READY,
        git_sha="abc123",
        hg_sha="def456",
        merge_dates=MergeDates(date(2024, 5, 13), date(2024, 4, 15)),
        locales={},
    )


# ── Exit codes and output ──


class TestMain:
    def test_ready_prints_json(self):
        outcome, run = _invoke([], _ready())

        assert outcome.exit_code == 0
        data = json.loads(outcome.stdout)
        assert data["status"] == "ready"
        assert data["git_sha"] == "abc123"
        assert data["merge_dates"] == {"beta_start": "2024-05-13", "release_start": "2024-04-15"}
        assert data["trainhop_blocked"] is False

        settings, revision, kind, _operator = run.await_args.args
        assert revision == ""
        assert kind is ShaKind.HG
        assert settings.github_api.startswith("https://")

    def test_error_exit_code(self):
        result = ReadinessResult(
            status=ReadinessStatus.ERROR,
            git_sha="nope",
            error="SHA nope not found in repository",
            failed_branch="revision",
        )
        outcome, _ = _invoke(["nope", "--kind", "git"], result)

        assert outcome.exit_code == 1
        assert "Error: SHA nope not found in repository" in outcome.output

    def test_dates_required_exit_code(self):
        exc = MissingInputError("Beta start date required for locales analysis")
        result = ReadinessResult(
            status=ReadinessStatus.DATES_REQUIRED,
            git_sha="abc123",
            hg_sha="def456",
            error=str(exc),
            failure=exc,
        )
        outcome, _ = _invoke([], result)

        assert outcome.exit_code == 2
        assert "Beta start date required" in outcome.output

    def test_revision_and_kind_forwarded(self):
        _, run = _invoke(["9f8e7d6c", "--kind", "git"], _ready())
        _, revision, kind, _ = run.await_args.args
        assert (revision, kind) == ("9f8e7d6c", ShaKind.GIT)

    def test_invalid_kind_rejected(self):
        outcome, run = _invoke(["abc", "--kind", "svn"], _ready())
        assert outcome.exit_code == 2
        run.assert_not_called()

    def test_cache_path_override(self, tmp_path):
        cache = tmp_path / "cache.json"
        _, run = _invoke(["--cache", str(cache)], _ready())
        settings = run.await_args.args[0]
        assert settings.cache_path == Path(cache)


# ── Merge date options ──


class TestDateOptions:
    def test_non_interactive_declines(self):
        _, run = _invoke([], _ready())
        assert isinstance(run.await_args.args[3], DeclineDates)

    def test_flags_become_fixed_answers(self):
        _, run = _invoke(["--beta-start", "2024-05-13"], _ready())
        operator = run.await_args.args[3]
        assert isinstance(operator, FixedDates)
        assert asyncio.run(operator.request_date("Beta start date")) == date(2024, 5, 13)

    def test_invalid_date_rejected(self):
        outcome, run = _invoke(["--release-start", "2024-02-30"], _ready())
        assert outcome.exit_code == 2
        assert "YYYY-MM-DD" in outcome.output
        run.assert_not_called()

    def test_unflagged_date_still_prompted_on_a_terminal(self):
        with patch("trainhop_station.cli._interactive", return_value=True):
            _, run = _invoke(["--beta-start", "2024-05-13"], _ready())
        operator = run.await_args.args[3]

        with patch("trainhop_station.cli.click.prompt", return_value="2024-04-15") as prompt:
            beta = asyncio.run(operator.request_date(BETA_START_DESCRIPTION))
            release = asyncio.run(operator.request_date(RELEASE_START_DESCRIPTION))

        assert (beta, release) == (date(2024, 5, 13), date(2024, 4, 15))
        prompt.assert_called_once()

    def test_unflagged_date_declined_without_terminal(self):
        _, run = _invoke(["--beta-start", "2024-05-13"], _ready())
        operator = run.await_args.args[3]
        assert asyncio.run(operator.request_date(RELEASE_START_DESCRIPTION)) is None


class TestStartup:
    def test_dotenv_loaded_before_logging_is_configured(self):
        calls = MagicMock()
        with patch("trainhop_station.cli._run", AsyncMock(return_value=_ready())), patch(
            "trainhop_station.cli.load_dotenv", calls.load_dotenv
        ), patch("trainhop_station.cli.setup_logging", calls.setup_logging):
            outcome = CliRunner().invoke(main, ["-v"])

        assert outcome.exit_code == 0
        assert [c[0] for c in calls.mock_calls] == ["load_dotenv", "setup_logging"]
        calls.setup_logging.assert_called_once_with("DEBUG")


class TestClickDatePrompt:
    @pytest.mark.anyio
    async def test_reprompts_until_valid(self):
        with patch("trainhop_station.cli.click.prompt", side_effect=["15/01/2024", "2024-01-15"]):
            with patch("trainhop_station.cli.click.echo") as echo:
                answer = await ClickDatePrompt().request_date("Beta start date")

        assert answer == date(2024, 1, 15)
        echo.assert_called_once()
        assert "Invalid date format" in echo.call_args.args[0]

    @pytest.mark.anyio
    async def test_empty_answer_declines(self):
        with patch("trainhop_station.cli.click.prompt", return_value="  "):
            assert await ClickDatePrompt().request_date("Beta start date") is None

    @pytest.mark.anyio
    async def test_prompt_names_the_date(self):
        with patch("trainhop_station.cli.click.prompt", return_value="") as prompt:
            await ClickDatePrompt().request_date("Release start date")
        assert "Failed to fetch Release start date automatically" in prompt.call_args.args[0]
