"""Data models and contracts.

- ProductDocument: Parsed view of one product XML document
- ProductProperties: Validated catalog property bag
- FeatureRecord: Extracted footprint + properties
- FeatureStore: Storage collaborator protocol
"""

from s1_metadata.models.contracts import (
    FeatureRecordPayload,
    FeatureStore,
    PolygonGeometryPayload,
)
from s1_metadata.models.document import (
    GridPoint,
    OrbitDirection,
    ProductDocument,
    SchemaVariant,
)
from s1_metadata.models.feature import FeatureRecord
from s1_metadata.models.properties import ProductProperties

__all__ = [
    "FeatureRecord",
    "FeatureRecordPayload",
    "FeatureStore",
    "GridPoint",
    "OrbitDirection",
    "PolygonGeometryPayload",
    "ProductDocument",
    "ProductProperties",
    "SchemaVariant",
]
