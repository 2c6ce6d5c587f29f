"""Shared extraction constants — single source of truth.

Centralises the element names of both Sentinel-1 product schemas and
the fixed property values written into every feature record.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Fixed property values
# ---------------------------------------------------------------------------

AUTHORITY: str = "ESA"
"""Authority recorded on every Sentinel-1 feature."""

LEGACY_PROCESSING_LEVEL: str = "LEVEL1"
"""Processing level for legacy products (the legacy schema does not encode it)."""

CLOUD_COVER: int = 0
"""SAR products carry no cloud information."""

DEFAULT_COLLECTION_NAME: str = "S1"
"""Default target collection handed to the feature store."""

# ---------------------------------------------------------------------------
# Schema markers and element names
# ---------------------------------------------------------------------------

LEGACY_MARKER_TAG: str = "adsHeader"
"""Header block only present in the legacy annotation schema."""

GRID_POINT_TAG: str = "geolocationGridPoint"

FOOTPRINT_TAG: str = "footprint"

# Property key → element name, shared by both schemas
COMMON_FIELDS: dict[str, str] = {
    "title": "title",
    "resourceSize": "resourceSize",
    "startDate": "startTime",
    "completionDate": "stopTime",
    "productType": "productType",
    "platform": "missionId",
    "sensorMode": "mode",
    "orbitNumber": "absoluteOrbitNumber",
    "swath": "swath",
    "polarisation": "polarisation",
}

MODERN_FIELDS: dict[str, str] = {
    **COMMON_FIELDS,
    "processingLevel": "processingLevel",
    "orbitDirection": "orbitDirection",
    "missionTakeId": "missiontakeid",
    "instrument": "instrument",
}

LEGACY_FIELDS: dict[str, str] = {
    **COMMON_FIELDS,
    "orbitDirection": "pass",
    "missionTakeId": "missionDataTakeId",
}

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

# Minimum vertices for a valid polygon ring (3 distinct + closing = 4)
MIN_POLYGON_VERTICES = 4

# Vertices of a closed SAFE quadrilateral footprint (4 corners + closing)
QUADRILATERAL_VERTICES = 5

# ---------------------------------------------------------------------------
# Input limits
# ---------------------------------------------------------------------------

DEFAULT_MAX_INPUT_BYTES: int = 10 * 1024 * 1024
