"""Rollouts engine — live Nimbus rollouts for New Tab."""

from trainhop_station.engines.rollouts.models import Rollout
from trainhop_station.engines.rollouts.report import fetch_rollouts, parse_rollouts, rollouts_for

__all__ = ["Rollout", "fetch_rollouts", "parse_rollouts", "rollouts_for"]
