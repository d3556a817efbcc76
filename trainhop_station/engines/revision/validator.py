"""Pick and validate the revision an assessment runs against."""

from __future__ import annotations

import structlog

from trainhop_station.engines.revision.models import RevisionIds, ShaKind
from trainhop_station.engines.revision.resolver import IdentifierResolver
from trainhop_station.errors import ServiceError
from trainhop_station.upstream.github import GitHubClient

log = structlog.get_logger("trainhop_station.revision")


class RevisionValidator:
    """Resolve user input into a validated Git SHA and its Mercurial twin.

    Existence is only ever checked against the GitHub history, so a
    Mercurial input is normalized to Git first. When a step fails, the
    raised :class:`ServiceError` carries whatever was resolved before it
    in ``exc.ids``.
    """

    def __init__(self, github: GitHubClient, resolver: IdentifierResolver) -> None:
        self._github = github
        self._resolver = resolver

    async def resolve_target(self, raw_input: str, input_kind: ShaKind) -> RevisionIds:
        sha = (raw_input or "").strip()
        kind = input_kind if sha else ShaKind.GIT
        git_sha: str | None = sha if sha and kind is ShaKind.GIT else None
        hg_sha: str | None = sha if sha and kind is ShaKind.HG else None

        try:
            if not sha:
                git_sha = await self._github.latest_commit_sha()
                log.info("validator.latest", git_sha=git_sha)
            else:
                if kind is ShaKind.HG:
                    git_sha = await self._resolver.hg_to_git(sha)
                git_sha = await self._github.get_commit_sha(git_sha)
            hg_sha = await self._resolver.git_to_hg(git_sha)
        except ServiceError as exc:
            exc.ids = RevisionIds(git_sha=git_sha, hg_sha=hg_sha, input_kind=kind)
            raise

        log.info("validator.validated", git_sha=git_sha, hg_sha=hg_sha)
        return RevisionIds(git_sha=git_sha, hg_sha=hg_sha, input_kind=kind)
