"""Live New Tab rollouts from the Nimbus Experimenter API."""

from __future__ import annotations

from typing import Any

import structlog

from trainhop_station.engines.rollouts.models import Rollout
from trainhop_station.errors import UpstreamUnavailable
from trainhop_station.upstream.http import ApiClient

log = structlog.get_logger("trainhop_station.rollouts")

_APPLICATION = "firefox-desktop"
_APP_NAME = "firefox_desktop"
_FEATURE_PREFIX = "newtab"


def _channels(recipe: dict[str, Any]) -> list[str]:
    channels = recipe.get("channels")
    if channels:
        return list(channels)
    channel = recipe.get("channel")
    return [channel] if channel else []


def _percentage(recipe: dict[str, Any]) -> float:
    bucket = recipe.get("bucketConfig") or {}
    total = bucket.get("total") or 0
    if not total:
        return 0.0
    return bucket.get("count", 0) / total * 100


def parse_rollouts(recipes: list[dict[str, Any]]) -> list[Rollout]:
    """Keep desktop rollouts whose features include a New Tab feature."""
    rollouts: list[Rollout] = []
    for recipe in recipes:
        if not recipe.get("isRollout") or recipe.get("appName") != _APP_NAME:
            continue
        features = recipe.get("featureIds") or []
        if not any(f.startswith(_FEATURE_PREFIX) for f in features):
            continue
        rollouts.append(
            Rollout(
                slug=recipe["slug"],
                user_facing_name=recipe.get("userFacingName") or recipe["slug"],
                channels=_channels(recipe),
                percentage=_percentage(recipe),
            )
        )
    return rollouts


def rollouts_for(rollouts: list[Rollout], channel: str) -> list[Rollout]:
    return [r for r in rollouts if channel in r.channels]


async def fetch_rollouts(nimbus: ApiClient) -> list[Rollout]:
    """GET experiments/ — published recipes, filtered to New Tab rollouts."""
    recipes = await nimbus.get_json("experiments/", params={"application": _APPLICATION})
    if not isinstance(recipes, list):
        raise UpstreamUnavailable("unexpected Nimbus experiments payload")
    rollouts = parse_rollouts(recipes)
    log.info("rollouts.collected", recipes=len(recipes), rollouts=len(rollouts))
    return rollouts
