"""Pydantic model for the feature property bag.

Validates the flat property map produced by the field extractors
before it is frozen into a ``FeatureRecord``.  Source values are kept
as the text read from the XML; only ``cloudCover`` is numeric.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from s1_metadata.core.constants import AUTHORITY, CLOUD_COVER
from s1_metadata.models.document import OrbitDirection


class ProductProperties(BaseModel):
    """Property bag of a Sentinel-1 feature record.

    Field names are the catalog property keys (camelCase) so that
    ``model_dump()`` is directly the ``properties`` object of the
    GeoJSON feature.

    Attributes:
        productIdentifier: Unique product identifier (same as ``title``).
        title: Product title (SAFE name without extension).
        resourceSize: Product archive size in bytes, as source text.
        authority: Always ``"ESA"``.
        startDate: Acquisition start timestamp.
        completionDate: Acquisition stop timestamp.
        productType: Product type (``GRD``, ``SLC``, ``OCN`` ...).
        processingLevel: Processing level (``"LEVEL1"`` for legacy products).
        platform: Mission identifier (``S1A``, ``S1B`` ...).
        sensorMode: Acquisition mode (``IW``, ``EW``, ``SM``, ``WV``).
        orbitNumber: Absolute orbit number, as source text.
        orbitDirection: ``"ascending"`` or ``"descending"``.
        swath: Swath identifier.
        polarisation: Polarisation channels (e.g. ``"VV VH"``).
        missionTakeId: Mission data-take identifier, as source text.
        instrument: Instrument name; ``None`` for legacy products, in
            which case the key is omitted from the dump.
        location: Storage-location hint ``YYYY/MM/DD/{platform}/{title}``.
        cloudCover: Always ``0``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", use_enum_values=True)

    productIdentifier: str
    title: str
    resourceSize: str
    authority: Literal["ESA"] = AUTHORITY
    startDate: str
    completionDate: str
    productType: str
    processingLevel: str
    platform: str
    sensorMode: str
    orbitNumber: str
    orbitDirection: OrbitDirection
    swath: str
    polarisation: str
    missionTakeId: str
    instrument: str | None = None
    location: str
    cloudCover: int = Field(default=CLOUD_COVER)

    @field_validator("cloudCover")
    @classmethod
    def _cloud_cover_is_zero(cls, value: int) -> int:
        if value != CLOUD_COVER:
            msg = f"cloudCover must be {CLOUD_COVER} for SAR products, got {value}"
            raise ValueError(msg)
        return value

    def to_dict(self) -> dict[str, str | int | None]:
        """Serialise to the catalog property map.

        ``instrument`` is dropped when unset so legacy records carry no
        such key at all.
        """
        data = self.model_dump()
        if data.get("instrument") is None:
            data.pop("instrument", None)
        return data
