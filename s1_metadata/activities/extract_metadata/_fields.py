"""Variant-specific property extraction.

Each schema variant is a strategy that maps element names to catalog
property keys.  Both strategies return the flat property map without
``location``, which the pipeline adds once the path is built.

Differences between the variants:
- current schema: orbit direction in ``<orbitDirection>``, data-take id in
  ``<missiontakeid>``, explicit ``<processingLevel>`` and ``<instrument>``
- legacy schema: orbit direction in ``<pass>``, data-take id in
  ``<missionDataTakeId>``, processing level fixed to ``LEVEL1``, no instrument
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from s1_metadata.activities.extract_metadata._validation import (
    InvalidFieldError,
    MissingFieldError,
)
from s1_metadata.core.constants import (
    AUTHORITY,
    CLOUD_COVER,
    LEGACY_FIELDS,
    LEGACY_PROCESSING_LEVEL,
    MODERN_FIELDS,
)
from s1_metadata.models.document import OrbitDirection, ProductDocument, SchemaVariant

PropertyMap = dict[str, str | int | None]


def require_text(document: ProductDocument, element_name: str) -> str:
    """Return the text of a required element.

    Raises:
        MissingFieldError: If the element is absent or blank.
    """
    value = document.text(element_name)
    if not value:
        raise MissingFieldError(element_name)
    return value


def parse_orbit_direction(document: ProductDocument, element_name: str) -> OrbitDirection:
    """Read and lower-case the orbit direction from *element_name*.

    Raises:
        MissingFieldError: If the element is absent or blank.
        InvalidFieldError: If the value is neither ascending nor descending.
    """
    raw = require_text(document, element_name)
    try:
        return OrbitDirection(raw.lower())
    except ValueError as exc:
        raise InvalidFieldError(
            element_name, raw, "expected ASCENDING or DESCENDING"
        ) from exc


def _extract(
    document: ProductDocument,
    fields: Mapping[str, str],
    orbit_element: str,
) -> PropertyMap:
    properties: PropertyMap = {}
    for key, element_name in fields.items():
        if element_name == orbit_element:
            continue
        properties[key] = require_text(document, element_name)

    properties["orbitDirection"] = parse_orbit_direction(document, orbit_element).value
    properties["productIdentifier"] = properties["title"]
    properties["authority"] = AUTHORITY
    properties["cloudCover"] = CLOUD_COVER
    return properties


def extract_modern_properties(document: ProductDocument) -> PropertyMap:
    """Extract the property map from a current-schema product document.

    Raises:
        MissingFieldError: If any required element is absent.
        InvalidFieldError: If the orbit direction is unrecognised.
    """
    return _extract(document, MODERN_FIELDS, MODERN_FIELDS["orbitDirection"])


def extract_legacy_properties(document: ProductDocument) -> PropertyMap:
    """Extract the property map from a legacy-schema product document.

    Raises:
        MissingFieldError: If any required element is absent.
        InvalidFieldError: If the pass direction is unrecognised.
    """
    properties = _extract(document, LEGACY_FIELDS, LEGACY_FIELDS["orbitDirection"])
    properties["processingLevel"] = LEGACY_PROCESSING_LEVEL
    return properties


PROPERTY_EXTRACTORS: dict[SchemaVariant, Callable[[ProductDocument], PropertyMap]] = {
    SchemaVariant.MODERN: extract_modern_properties,
    SchemaVariant.LEGACY: extract_legacy_properties,
}
