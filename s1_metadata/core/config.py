"""Extraction configuration loaded from environment variables.

All values have defaults suitable for the standard Sentinel-1
collection.  ``from_env()`` raises ``ConfigValidationError`` when a
value is out of range so bad settings surface at startup rather than
halfway through an ingestion batch.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from s1_metadata.core.constants import DEFAULT_COLLECTION_NAME, DEFAULT_MAX_INPUT_BYTES
from s1_metadata.core.exceptions import PipelineError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ConfigValidationError(PipelineError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        reason: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid configuration {key}={value!r}: {reason}")


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    """Immutable extraction configuration.

    Attributes:
        collection_name: Collection the extracted features are stored into.
        max_input_bytes: Largest decoded XML document accepted for parsing.
        validate_geometry: Run the shapely validity and area check on
            every resolved footprint.
    """

    collection_name: str = DEFAULT_COLLECTION_NAME
    max_input_bytes: int = DEFAULT_MAX_INPUT_BYTES
    validate_geometry: bool = True

    @classmethod
    def from_env(cls) -> ExtractionConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or a
                boolean flag is not recognised.
            ValueError: If ``S1_MAX_INPUT_BYTES`` is not an integer.
        """
        config = cls(
            collection_name=os.getenv("S1_COLLECTION_NAME", DEFAULT_COLLECTION_NAME),
            max_input_bytes=int(os.getenv("S1_MAX_INPUT_BYTES", str(DEFAULT_MAX_INPUT_BYTES))),
            validate_geometry=_parse_bool(
                "S1_VALIDATE_GEOMETRY", os.getenv("S1_VALIDATE_GEOMETRY", "true")
            ),
        )
        _validate(config)
        return config


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (true/false)")


def _validate(config: ExtractionConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.collection_name.strip():
        raise ConfigValidationError(
            "S1_COLLECTION_NAME",
            config.collection_name,
            "must not be empty",
        )

    if config.max_input_bytes <= 0:
        raise ConfigValidationError(
            "S1_MAX_INPUT_BYTES",
            config.max_input_bytes,
            "must be > 0 (bytes)",
        )
