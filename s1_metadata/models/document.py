"""Intermediate document model for Sentinel-1 product XML.

The XML is parsed once into a ``ProductDocument``: the first-occurrence
text of every element keyed by its local name, the geolocation grid
points, and the detected schema variant.  Field and footprint
extraction work on this model only and never touch the XML library.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class SchemaVariant(enum.Enum):
    """Sentinel-1 product XML schema generations."""

    MODERN = "modern"
    LEGACY = "legacy"


class OrbitDirection(str, enum.Enum):
    """Satellite pass direction, always stored lower-case."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True, slots=True)
class GridPoint:
    """A raw geolocation grid tie point as read from the annotation.

    Values are kept as source text; the footprint resolver converts
    and validates them.
    """

    line: str | None = None
    pixel: str | None = None
    latitude: str | None = None
    longitude: str | None = None


@dataclass(frozen=True, slots=True)
class ProductDocument:
    """Parsed, read-only view of one product XML document.

    Attributes:
        root_tag: Local name of the document root element.
        elements: First-occurrence text of each element, keyed by local
            name.  Elements without text map to ``""``.
        grid_points: Geolocation grid tie points in document order.
    """

    root_tag: str
    elements: dict[str, str] = field(default_factory=dict)
    grid_points: list[GridPoint] = field(default_factory=list)

    def has_element(self, name: str) -> bool:
        """Whether an element with local name *name* occurs anywhere."""
        return name in self.elements

    def text(self, name: str) -> str | None:
        """Return the stripped first-occurrence text of *name*, or ``None``."""
        value = self.elements.get(name)
        return value.strip() if value is not None else None
