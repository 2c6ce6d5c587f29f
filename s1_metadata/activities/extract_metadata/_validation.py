"""Errors and geometry validation for metadata extraction.

Responsibilities:
- Extraction exception hierarchy (public API, re-exported from __init__)
- Footprint ring structure checks (closure, vertex count, WGS 84 bounds)
- Shapely validity and area check
"""

from __future__ import annotations

import logging

from s1_metadata.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MIN_POLYGON_VERTICES,
)
from s1_metadata.core.exceptions import ValidationError

logger = logging.getLogger("s1_metadata.activities.extract_metadata")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class MetadataExtractionError(ValidationError):
    """Raised when a product document cannot be turned into a feature."""

    default_stage = "extract_metadata"
    default_code = "EXTRACTION_FAILED"


class MalformedInputError(MetadataExtractionError):
    """Raised when the input is not well-formed XML."""

    default_code = "XML_MALFORMED"


class MissingFieldError(MetadataExtractionError):
    """Raised when a required element is absent for the detected schema.

    Attributes:
        field_name: XML element name that was expected.
    """

    default_code = "FIELD_MISSING"

    def __init__(self, field_name: str, **kwargs: object) -> None:
        self.field_name = field_name
        super().__init__(f"Required element <{field_name}> is missing", **kwargs)


class InvalidFieldError(MetadataExtractionError):
    """Raised when a required element holds an unusable value.

    Attributes:
        field_name: XML element name.
        value: The rejected text.
    """

    default_code = "FIELD_INVALID"

    def __init__(self, field_name: str, value: str, reason: str, **kwargs: object) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(f"Element <{field_name}> has invalid value {value!r}: {reason}", **kwargs)


class GeometryExtractionError(MetadataExtractionError):
    """Raised when the footprint cannot be turned into a valid polygon ring."""

    default_code = "GEOMETRY_INVALID"


# ---------------------------------------------------------------------------
# Ring validation
# ---------------------------------------------------------------------------


def validate_coordinates(coords: list[tuple[float, float]], title: str) -> None:
    """Validate that all coordinates are within WGS 84 bounds.

    Raises:
        GeometryExtractionError: If any coordinate is out of bounds.
    """
    for lon, lat in coords:
        if not (MIN_LONGITUDE <= lon <= MAX_LONGITUDE):
            msg = (
                f"Longitude {lon} out of WGS 84 range [{MIN_LONGITUDE}, {MAX_LONGITUDE}] "
                f"in footprint of '{title}'"
            )
            raise GeometryExtractionError(msg)
        if not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
            msg = (
                f"Latitude {lat} out of WGS 84 range [{MIN_LATITUDE}, {MAX_LATITUDE}] "
                f"in footprint of '{title}'"
            )
            raise GeometryExtractionError(msg)


def validate_polygon_ring(coords: list[tuple[float, float]], title: str) -> None:
    """Validate a footprint ring is closed and has enough distinct vertices.

    Unlike hand-drawn boundaries, footprints are never auto-closed here:
    an open ring at this stage means the resolver produced it wrongly.

    Raises:
        GeometryExtractionError: If the ring is open, too short, or degenerate.
    """
    if len(coords) < MIN_POLYGON_VERTICES:
        msg = (
            f"Footprint ring has {len(coords)} vertices, need at least "
            f"{MIN_POLYGON_VERTICES} (including closure) for '{title}'"
        )
        raise GeometryExtractionError(msg)

    if coords[0] != coords[-1]:
        msg = f"Footprint ring is not closed for '{title}'"
        raise GeometryExtractionError(msg)

    if len(set(coords)) < 3:
        msg = f"Footprint ring has fewer than 3 distinct vertices for '{title}'"
        raise GeometryExtractionError(msg)


def validate_shapely_geometry(coords: list[tuple[float, float]], title: str) -> None:
    """Validate the footprint using shapely.

    Footprints come from the ground segment and are not repaired; an
    invalid or zero-area polygon aborts the extraction.

    Raises:
        GeometryExtractionError: If the polygon is invalid or has no area.
    """
    from shapely.geometry import Polygon

    try:
        poly = Polygon(coords)
    except (ValueError, TypeError) as exc:
        msg = f"Cannot create footprint polygon for '{title}': {exc}"
        raise GeometryExtractionError(msg) from exc

    if not poly.is_valid:
        from shapely.validation import explain_validity

        msg = f"Invalid footprint polygon for '{title}': {explain_validity(poly)}"
        raise GeometryExtractionError(msg)

    if poly.area == 0:
        msg = f"Zero-area footprint polygon for '{title}'"
        raise GeometryExtractionError(msg)

    logger.debug("Footprint polygon valid for '%s' (area=%.6f deg²)", title, poly.area)
