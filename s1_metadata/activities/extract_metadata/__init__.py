"""Metadata extraction activity — Sentinel-1 product XML to feature record.

Turns one percent-encoded product XML payload into a ``FeatureRecord``:
a footprint polygon plus the flat catalog property bag.

The pipeline is split into focused stages:
- **_parser**: payload decoding, lxml parse into ``ProductDocument``,
  schema variant detection
- **_fields**: per-variant property extraction strategies
- **_footprint**: WKT / geolocation-grid footprint and vertex reordering
- **_validation**: exception hierarchy and ring/geometry checks

Every stage either succeeds or raises a ``MetadataExtractionError``
subclass; a record is never emitted half-built.  The transform is pure
and holds no state between calls.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from s1_metadata.activities.extract_metadata._fields import (
    PROPERTY_EXTRACTORS,
    extract_legacy_properties,
    extract_modern_properties,
    parse_orbit_direction,
    require_text,
)
from s1_metadata.activities.extract_metadata._footprint import (
    footprint_from_grid,
    parse_wkt_polygon,
    reorder_footprint,
    resolve_footprint,
)
from s1_metadata.activities.extract_metadata._parser import (
    RawInput,
    decode_input,
    detect_variant,
    parse_product_xml,
)
from s1_metadata.activities.extract_metadata._validation import (
    GeometryExtractionError,
    InvalidFieldError,
    MalformedInputError,
    MetadataExtractionError,
    MissingFieldError,
    validate_coordinates,
    validate_polygon_ring,
    validate_shapely_geometry,
)
from s1_metadata.core.config import ExtractionConfig
from s1_metadata.core.exceptions import ContractError, PipelineError
from s1_metadata.models.document import OrbitDirection
from s1_metadata.models.feature import FeatureRecord
from s1_metadata.models.properties import ProductProperties
from s1_metadata.utils.location_paths import build_location_path

logger = logging.getLogger("s1_metadata.activities.extract_metadata")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "PROPERTY_EXTRACTORS",
    "GeometryExtractionError",
    "InvalidFieldError",
    "MalformedInputError",
    "MetadataExtractionError",
    "MissingFieldError",
    "RawInput",
    "decode_input",
    "detect_variant",
    "extract_legacy_properties",
    "extract_modern_properties",
    "footprint_from_grid",
    "parse_orbit_direction",
    "parse_product_xml",
    "parse_wkt_polygon",
    "reorder_footprint",
    "require_text",
    "resolve_footprint",
    "transform",
    "validate_coordinates",
    "validate_polygon_ring",
    "validate_shapely_geometry",
]


def transform(
    raw: RawInput,
    *,
    config: ExtractionConfig | None = None,
    correlation_id: str = "",
) -> FeatureRecord:
    """Convert a Sentinel-1 product XML payload into a feature record.

    Args:
        raw: Percent-encoded product XML as text, bytes, or text chunks.
        config: Extraction settings. Defaults to ``ExtractionConfig()``.
        correlation_id: Caller identifier for the item, attached to any
            raised ``PipelineError``.

    Returns:
        The extracted ``FeatureRecord``.

    Raises:
        MalformedInputError: If the payload is not well-formed XML.
        MissingFieldError: If a required element is absent.
        InvalidFieldError: If the orbit direction is unrecognised or the
            start time carries no YYYY-MM-DD date.
        GeometryExtractionError: If no valid footprint ring can be built.
        ContractError: If the assembled properties violate the record model.
    """
    config = config or ExtractionConfig()
    try:
        return _transform(raw, config)
    except PipelineError as exc:
        exc.attach_correlation_id(correlation_id)
        raise


def _transform(raw: RawInput, config: ExtractionConfig) -> FeatureRecord:
    # Step 1: Decode and parse once
    document = parse_product_xml(decode_input(raw, max_bytes=config.max_input_bytes))

    # Step 2: Pick the schema strategy
    variant = detect_variant(document)
    properties = PROPERTY_EXTRACTORS[variant](document)
    title = str(properties["title"])

    # Step 3: Footprint, reordered for the pass direction
    ring = resolve_footprint(
        document,
        variant,
        OrbitDirection(properties["orbitDirection"]),
        title=title,
        validate_geometry=config.validate_geometry,
    )

    # Step 4: Storage-location hint
    start_time = str(properties["startDate"])
    try:
        properties["location"] = build_location_path(
            start_time, str(properties["platform"]), title
        )
    except ValueError as exc:
        raise InvalidFieldError("startTime", start_time, str(exc)) from exc

    try:
        validated = ProductProperties(**properties)  # type: ignore[arg-type]
    except PydanticValidationError as exc:
        msg = f"Extracted properties for '{title}' violate the record model: {exc}"
        raise ContractError(
            msg, stage="extract_metadata", code="PROPERTIES_CONTRACT_VIOLATION"
        ) from exc

    logger.info(
        "Extracted feature | title=%s | variant=%s | orbit=%s | vertices=%d",
        title,
        variant.value,
        validated.orbitDirection,
        len(ring),
    )
    return FeatureRecord(geometry=[ring], properties=validated.to_dict())
