"""Data model for an extracted Sentinel-1 feature record.

A ``FeatureRecord`` is the sole output of the extraction: one footprint
polygon (outer ring only) plus the flat catalog property bag.  It is
handed as-is to the feature store for persistence and indexing.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from s1_metadata.models.contracts import FeatureRecordPayload


@dataclass(frozen=True, slots=True)
class FeatureRecord:
    """A normalized Sentinel-1 product feature.

    Attributes:
        geometry: Polygon rings as lists of ``(lon, lat)`` tuples.  Holds
            exactly one closed outer ring.
        properties: Catalog property map (see ``ProductProperties``).
    """

    geometry: list[list[tuple[float, float]]] = field(default_factory=list)
    properties: dict[str, str | int | None] = field(default_factory=dict)

    def to_dict(self) -> FeatureRecordPayload:
        """Serialise to a GeoJSON ``Feature`` dict."""
        return {
            "type": "Feature",
            "geometry": {
                "type": "Polygon",
                "coordinates": [[list(c) for c in ring] for ring in self.geometry],
            },
            "properties": dict(self.properties),
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> FeatureRecord:
        """Deserialise from a GeoJSON ``Feature`` dict.

        Raises:
            TypeError: If the geometry or properties have unexpected types.
        """
        geometry_raw = data.get("geometry", {})
        if not isinstance(geometry_raw, dict):
            msg = f"geometry must be a dict, got {type(geometry_raw).__name__}"
            raise TypeError(msg)
        rings_raw = geometry_raw.get("coordinates", [])
        if not isinstance(rings_raw, list):
            msg = f"geometry.coordinates must be a list, got {type(rings_raw).__name__}"
            raise TypeError(msg)
        rings = [[(float(c[0]), float(c[1])) for c in ring] for ring in rings_raw]

        properties_raw = data.get("properties", {})
        if not isinstance(properties_raw, dict):
            msg = f"properties must be a dict, got {type(properties_raw).__name__}"
            raise TypeError(msg)

        return cls(geometry=rings, properties={str(k): v for k, v in properties_raw.items()})

    @property
    def exterior(self) -> list[tuple[float, float]]:
        """The outer ring of the footprint."""
        return self.geometry[0] if self.geometry else []

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the outer ring, closing vertex included."""
        return len(self.exterior)
