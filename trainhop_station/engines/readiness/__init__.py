"""Readiness engine — compose every check into one train-hop verdict."""

from trainhop_station.engines.readiness.models import ReadinessResult, ReadinessStatus
from trainhop_station.engines.readiness.operator_input import (
    BETA_START_DESCRIPTION,
    RELEASE_START_DESCRIPTION,
    DatePrompt,
    DeclineDates,
    FixedDates,
)
from trainhop_station.engines.readiness.orchestrator import RevisionReadinessOrchestrator

__all__ = [
    "BETA_START_DESCRIPTION",
    "RELEASE_START_DESCRIPTION",
    "DatePrompt",
    "DeclineDates",
    "FixedDates",
    "ReadinessResult",
    "ReadinessStatus",
    "RevisionReadinessOrchestrator",
]
