"""GitHub REST client for the Firefox repository."""

from __future__ import annotations

import base64
import binascii
from typing import Any

import httpx

from trainhop_station.errors import NotFoundError, UpstreamUnavailable
from trainhop_station.upstream.http import ApiClient


class GitHubClient(ApiClient):
    """Read-only access to ``repos/<owner>/<repo>`` on the GitHub API.

    *base_url* points at the repository itself, e.g.
    ``https://api.github.com/repos/mozilla-firefox/firefox``.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers: dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"token {token}"
        super().__init__(base_url, headers=headers, timeout=timeout, transport=transport)

    async def latest_commit_sha(self) -> str:
        """Return the SHA of the most recent commit on the default branch."""
        commits = await self.get_json("commits", params={"per_page": 1})
        if not commits:
            raise NotFoundError("No commits found")
        return commits[0]["sha"]

    async def get_commit_sha(self, sha: str) -> str:
        """Return the full SHA of *sha*, raising NotFoundError if it does not exist."""
        try:
            commit = await self.get_json(f"commits/{sha}")
        except NotFoundError as exc:
            raise NotFoundError(f"SHA {sha} not found in repository", status=404) from exc
        return commit["sha"]

    async def last_commit_for_path(self, sha: str, path: str) -> dict[str, Any]:
        """Return the most recent commit touching *path* as of *sha*."""
        commits = await self.get_json(
            "commits", params={"sha": sha, "path": path, "per_page": 1}
        )
        if not commits:
            raise NotFoundError(f"No commit history for {path} at {sha}")
        return commits[0]

    async def get_file_text(self, sha: str, path: str) -> str:
        """Fetch *path* at *sha* through the contents API and decode it."""
        try:
            data = await self.get_json(f"contents/{path}", params={"ref": sha})
        except NotFoundError as exc:
            raise NotFoundError(f"File not found: {path} at {sha}", status=404) from exc

        if not isinstance(data, dict) or data.get("type") != "file" or not data.get("content"):
            raise UpstreamUnavailable(f"{path} at {sha} has no file content")
        return decode_content(data["content"])


def decode_content(content: str) -> str:
    """Decode a contents-API payload: base64 with embedded newlines."""
    try:
        raw = base64.b64decode(content.replace("\n", ""), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise UpstreamUnavailable("File content is not valid base64") from exc
    return raw.decode("utf-8")
