"""Data models for the active rollouts report."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rollout:
    """A live Nimbus rollout touching New Tab."""

    slug: str
    user_facing_name: str
    channels: list[str] = field(default_factory=list)
    percentage: float = 0.0

    @property
    def url(self) -> str:
        return f"https://experimenter.services.mozilla.com/nimbus/{self.slug}/summary/"
