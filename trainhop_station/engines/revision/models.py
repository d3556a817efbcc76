"""Data models for revision identifiers."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ShaKind(str, enum.Enum):
    """Namespace of a user-supplied revision identifier."""

    HG = "hg"
    GIT = "git"


class Direction(str, enum.Enum):
    """Translation direction between the Git and Mercurial namespaces.

    The value doubles as the cache key prefix.
    """

    GIT_TO_HG = "git2hg"
    HG_TO_GIT = "hg2git"

    @property
    def response_field(self) -> str:
        return "hg_hash" if self is Direction.GIT_TO_HG else "git_hash"

    @property
    def description(self) -> str:
        if self is Direction.GIT_TO_HG:
            return "Git SHA to Mercurial"
        return "Mercurial SHA to Git"


@dataclass(frozen=True)
class RevisionIds:
    """The same commit in both namespaces.

    ``git_sha`` is the identifier validated against GitHub; ``hg_sha`` is
    derived from it and used for Treeherder lookups.
    """

    git_sha: str | None
    hg_sha: str | None
    input_kind: ShaKind = ShaKind.GIT
