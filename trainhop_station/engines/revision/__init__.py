"""Revision engine — identifier translation and validation."""

from trainhop_station.engines.revision.cache import IdentifierCache, JsonFileCache, MemoryCache
from trainhop_station.engines.revision.models import Direction, RevisionIds, ShaKind
from trainhop_station.engines.revision.resolver import IdentifierResolver, cache_key
from trainhop_station.engines.revision.validator import RevisionValidator

__all__ = [
    "Direction",
    "IdentifierCache",
    "IdentifierResolver",
    "JsonFileCache",
    "MemoryCache",
    "RevisionIds",
    "RevisionValidator",
    "ShaKind",
    "cache_key",
]
