"""Error taxonomy shared by every engine and the orchestrator."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trainhop_station.engines.revision.models import RevisionIds


class ServiceError(Exception):
    """Base exception for all readiness pipeline failures.

    ``status`` is the upstream HTTP status when one was received.
    ``branch`` is filled in by the orchestrator with the name of the
    fetch branch that failed; components leave it unset. ``ids`` holds
    the identifiers already resolved when revision validation failed
    part-way.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        branch: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.branch = branch
        self.ids: RevisionIds | None = None


class NotFoundError(ServiceError):
    """Identifier, push or file does not exist upstream (-> HTTP 404)."""


class ConversionError(ServiceError):
    """Cross-reference (Lando) service could not translate an identifier."""


class UpstreamUnavailable(ServiceError):
    """Non-2xx/non-404 response, transport failure, or malformed payload."""


class MissingInputError(ServiceError):
    """The operator declined to supply a required merge date."""
