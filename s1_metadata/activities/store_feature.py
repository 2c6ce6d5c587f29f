"""Store feature activity — extract a product and hand it to the feature store.

This is the seam between the extraction and the catalog.  The payload
is transformed first; only a fully valid record ever reaches the store.
Extraction errors propagate unchanged so the ingestion caller can skip,
quarantine, or abort the batch.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from s1_metadata.activities.extract_metadata import transform
from s1_metadata.core.config import ExtractionConfig
from s1_metadata.core.exceptions import PermanentError, TransientError

if TYPE_CHECKING:
    from s1_metadata.activities.extract_metadata import RawInput
    from s1_metadata.models.contracts import FeatureStore
    from s1_metadata.models.feature import FeatureRecord

logger = logging.getLogger("s1_metadata.activities.store_feature")


class FeatureStoreError(PermanentError):
    """Raised when the feature store rejects a record."""

    default_stage = "store_feature"
    default_code = "FEATURE_STORE_FAILED"


class FeatureStoreUnavailableError(TransientError):
    """Raised when the feature store call itself fails; the item may be retried."""

    default_stage = "store_feature"
    default_code = "FEATURE_STORE_UNAVAILABLE"


def ingest_product(
    raw: RawInput,
    store: FeatureStore,
    *,
    collection_name: str = "",
    config: ExtractionConfig | None = None,
    correlation_id: str = "",
) -> FeatureRecord:
    """Extract a product feature and persist it through *store*.

    Args:
        raw: Percent-encoded product XML as text, bytes, or text chunks.
        store: Storage collaborator implementing ``FeatureStore``.
        collection_name: Target collection. Defaults to
            ``config.collection_name``.
        config: Extraction settings. Defaults to ``ExtractionConfig()``.
        correlation_id: Caller identifier for the item.

    Returns:
        The stored ``FeatureRecord``.

    Raises:
        MetadataExtractionError: If the payload cannot be extracted.
        FeatureStoreError: If the store reports failure.
        FeatureStoreUnavailableError: If the store call raises.
    """
    config = config or ExtractionConfig()
    collection_name = collection_name or config.collection_name

    record = transform(raw, config=config, correlation_id=correlation_id)
    title = record.properties.get("title", "")

    try:
        stored = store.store(record, collection_name)
    except Exception as exc:
        msg = f"Feature store failed for '{title}' in collection '{collection_name}': {exc}"
        raise FeatureStoreUnavailableError(msg, correlation_id=correlation_id) from exc

    if not stored:
        msg = f"Feature store rejected '{title}' for collection '{collection_name}'"
        raise FeatureStoreError(msg, correlation_id=correlation_id)

    logger.info(
        "Feature stored | title=%s | collection=%s | correlation_id=%s",
        title,
        collection_name,
        correlation_id,
    )
    return record
