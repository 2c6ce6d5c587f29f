"""Footprint polygon resolution.

Current-schema products carry the footprint as a WKT polygon string;
legacy annotation files only carry the geolocation grid, from which the
four raster corners are taken.

SAFE quicklook footprints are stored with a vertex order that is
inverted relative to the data hub, which re-orders them when it ingests
the quicklook images.  ``reorder_footprint`` applies the same correction
so features match the hub's starting corner and winding.
"""

from __future__ import annotations

import logging
import math

from s1_metadata.activities.extract_metadata._validation import (
    GeometryExtractionError,
    validate_coordinates,
    validate_polygon_ring,
    validate_shapely_geometry,
)
from s1_metadata.core.constants import FOOTPRINT_TAG, QUADRILATERAL_VERTICES
from s1_metadata.models.document import (
    GridPoint,
    OrbitDirection,
    ProductDocument,
    SchemaVariant,
)

logger = logging.getLogger("s1_metadata.activities.extract_metadata")

Ring = list[tuple[float, float]]

# Source index of each output vertex of a closed quadrilateral
_REORDER_INDICES: dict[OrbitDirection, tuple[int, ...]] = {
    OrbitDirection.ASCENDING: (1, 2, 3, 0, 1),
    OrbitDirection.DESCENDING: (3, 0, 1, 2, 3),
}


# ---------------------------------------------------------------------------
# Vertex reordering
# ---------------------------------------------------------------------------


def reorder_footprint(ring: Ring, orbit_direction: OrbitDirection | str) -> Ring:
    """Reorder a SAFE footprint ring to the data hub vertex order.

    Only closed quadrilaterals (four corners plus the closing vertex)
    carry the inversion; any other ring is returned unchanged.

    - ascending:  ``[v1, v2, v3, v0, v1]``
    - descending: ``[v3, v0, v1, v2, v3]``

    Args:
        ring: Closed ring of ``(lon, lat)`` vertices.
        orbit_direction: Pass direction (enum or case-insensitive text).

    Returns:
        A new ring; the input is not modified.

    Raises:
        ValueError: If *orbit_direction* is not ascending or descending.
    """
    if not isinstance(orbit_direction, OrbitDirection):
        orbit_direction = OrbitDirection(orbit_direction.strip().lower())

    if len(ring) != QUADRILATERAL_VERTICES:
        logger.warning("Footprint has %d vertices, vertex order left as-is", len(ring))
        return list(ring)

    return [ring[i] for i in _REORDER_INDICES[orbit_direction]]


# ---------------------------------------------------------------------------
# Footprint sources
# ---------------------------------------------------------------------------


def parse_wkt_polygon(text: str) -> Ring:
    """Parse a ``POLYGON ((lon lat, ...))`` string into its outer ring.

    Raises:
        GeometryExtractionError: If the text is not a non-empty WKT polygon
            or holds non-finite coordinates.
    """
    from shapely import wkt
    from shapely.errors import ShapelyError

    try:
        geom = wkt.loads(text.strip())
    except (ShapelyError, ValueError) as exc:
        msg = f"Footprint is not valid WKT: {exc}"
        raise GeometryExtractionError(msg) from exc

    if geom.geom_type != "Polygon" or geom.is_empty:
        msg = f"Footprint must be a non-empty POLYGON, got {geom.geom_type}"
        raise GeometryExtractionError(msg)

    ring: Ring = []
    for idx, coord in enumerate(geom.exterior.coords):
        lon, lat = float(coord[0]), float(coord[1])
        if not (math.isfinite(lon) and math.isfinite(lat)):
            msg = f"Footprint vertex {idx} is not finite (lon={lon}, lat={lat})"
            raise GeometryExtractionError(msg)
        ring.append((lon, lat))
    return ring


def footprint_from_grid(points: list[GridPoint]) -> Ring:
    """Build a closed quadrilateral from the corners of a geolocation grid.

    The corners are taken in raster order: first line/first pixel, first
    line/last pixel, last line/last pixel, last line/first pixel.

    Raises:
        GeometryExtractionError: If any tie point is incomplete or
            unparsable, or the grid has no corner on every side.
    """
    if not points:
        msg = "No geolocation grid points in legacy product"
        raise GeometryExtractionError(msg)

    positions: dict[tuple[int, int], tuple[float, float]] = {}
    for idx, point in enumerate(points):
        line, pixel, lon, lat = _grid_point_values(point, idx)
        positions.setdefault((line, pixel), (lon, lat))

    lines = {line for line, _ in positions}
    pixels = {pixel for _, pixel in positions}
    if len(lines) < 2 or len(pixels) < 2:
        msg = (
            f"Geolocation grid spans {len(lines)} line(s) and {len(pixels)} pixel(s), "
            f"need at least 2 of each"
        )
        raise GeometryExtractionError(msg)

    first_line, last_line = min(lines), max(lines)
    first_pixel, last_pixel = min(pixels), max(pixels)
    corner_keys = [
        (first_line, first_pixel),
        (first_line, last_pixel),
        (last_line, last_pixel),
        (last_line, first_pixel),
    ]

    corners: Ring = []
    for key in corner_keys:
        if key not in positions:
            msg = f"Geolocation grid has no tie point at corner line={key[0]}, pixel={key[1]}"
            raise GeometryExtractionError(msg)
        corners.append(positions[key])

    return [*corners, corners[0]]


def resolve_footprint(
    document: ProductDocument,
    variant: SchemaVariant,
    orbit_direction: OrbitDirection,
    *,
    title: str = "",
    validate_geometry: bool = True,
) -> Ring:
    """Extract, reorder and validate the footprint ring of a product.

    Args:
        document: Parsed product document.
        variant: Detected schema variant (selects the footprint source).
        orbit_direction: Pass direction driving the vertex reordering.
        title: Product title, used in error messages.
        validate_geometry: Also check validity and area with shapely.

    Returns:
        Closed ring of ``(lon, lat)`` vertices in data hub order.

    Raises:
        GeometryExtractionError: If the footprint is missing or unusable.
    """
    if variant is SchemaVariant.MODERN:
        text = document.text(FOOTPRINT_TAG)
        if not text:
            msg = f"Product '{title}' has no <{FOOTPRINT_TAG}> element"
            raise GeometryExtractionError(msg)
        ring = parse_wkt_polygon(text)
    else:
        ring = footprint_from_grid(document.grid_points)

    ring = reorder_footprint(ring, orbit_direction)

    validate_coordinates(ring, title)
    validate_polygon_ring(ring, title)
    if validate_geometry:
        validate_shapely_geometry(ring, title)

    return ring


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _grid_point_values(point: GridPoint, idx: int) -> tuple[int, int, float, float]:
    """Convert a raw grid point to ``(line, pixel, lon, lat)``."""
    raw = {
        "line": point.line,
        "pixel": point.pixel,
        "latitude": point.latitude,
        "longitude": point.longitude,
    }
    missing = [name for name, value in raw.items() if not value]
    if missing:
        msg = f"Geolocation grid point {idx} is missing {', '.join(missing)}"
        raise GeometryExtractionError(msg)

    try:
        line = int(point.line)  # type: ignore[arg-type]
        pixel = int(point.pixel)  # type: ignore[arg-type]
        lat = float(point.latitude)  # type: ignore[arg-type]
        lon = float(point.longitude)  # type: ignore[arg-type]
    except ValueError as exc:
        msg = f"Geolocation grid point {idx} is not numeric: {raw}"
        raise GeometryExtractionError(msg) from exc

    if not (math.isfinite(lat) and math.isfinite(lon)):
        msg = f"Geolocation grid point {idx} is not finite (lon={lon}, lat={lat})"
        raise GeometryExtractionError(msg)

    return line, pixel, lon, lat
