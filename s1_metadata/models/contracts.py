"""Canonical contracts between the extraction and its callers.

The dict form of a feature record is a ``TypedDict`` so the storage
collaborator and tests agree on key names.  The storage collaborator
itself is described as a ``Protocol``: any object with a matching
``store`` method can receive extracted records.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypedDict, runtime_checkable

if TYPE_CHECKING:
    from s1_metadata.models.feature import FeatureRecord


class PolygonGeometryPayload(TypedDict):
    """GeoJSON Polygon geometry."""

    type: str
    coordinates: list[list[list[float]]]


class FeatureRecordPayload(TypedDict):
    """Serialised ``FeatureRecord`` (GeoJSON Feature)."""

    type: str
    geometry: PolygonGeometryPayload
    properties: dict[str, str | int | None]


@runtime_checkable
class FeatureStore(Protocol):
    """Persistence/indexing collaborator for extracted records."""

    def store(self, record: FeatureRecord, collection_name: str) -> bool:
        """Persist *record* into *collection_name*; return success."""
        ...
