"""Tests for extraction configuration loading and fail-fast validation."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from s1_metadata.core.config import ConfigValidationError, ExtractionConfig
from s1_metadata.core.constants import DEFAULT_MAX_INPUT_BYTES


class TestExtractionConfig:
    """Loading from the environment."""

    def test_from_env_reads_values(self) -> None:
        env = {
            "S1_COLLECTION_NAME": "S1_PEPS",
            "S1_MAX_INPUT_BYTES": "2048",
            "S1_VALIDATE_GEOMETRY": "false",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = ExtractionConfig.from_env()

        assert cfg.collection_name == "S1_PEPS"
        assert cfg.max_input_bytes == 2048
        assert cfg.validate_geometry is False

    def test_defaults_when_env_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = ExtractionConfig.from_env()

        assert cfg.collection_name == "S1"
        assert cfg.max_input_bytes == DEFAULT_MAX_INPUT_BYTES
        assert cfg.validate_geometry is True

    @pytest.mark.parametrize("raw", ["1", "TRUE", "yes", " on "])
    def test_truthy_flags(self, raw: str) -> None:
        with patch.dict(os.environ, {"S1_VALIDATE_GEOMETRY": raw}, clear=True):
            assert ExtractionConfig.from_env().validate_geometry is True

    @pytest.mark.parametrize("raw", ["0", "False", "no", "off"])
    def test_falsy_flags(self, raw: str) -> None:
        with patch.dict(os.environ, {"S1_VALIDATE_GEOMETRY": raw}, clear=True):
            assert ExtractionConfig.from_env().validate_geometry is False

    def test_frozen_immutability(self) -> None:
        cfg = ExtractionConfig()
        with pytest.raises(AttributeError):
            cfg.collection_name = "other"  # type: ignore[misc]


class TestExtractionConfigValidation:
    """Fail-fast range validation in from_env."""

    def test_empty_collection_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"S1_COLLECTION_NAME": "  "}, clear=True),
            pytest.raises(ConfigValidationError, match="S1_COLLECTION_NAME"),
        ):
            ExtractionConfig.from_env()

    def test_zero_max_bytes_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"S1_MAX_INPUT_BYTES": "0"}, clear=True),
            pytest.raises(ConfigValidationError, match="must be > 0"),
        ):
            ExtractionConfig.from_env()

    def test_non_numeric_max_bytes(self) -> None:
        with (
            patch.dict(os.environ, {"S1_MAX_INPUT_BYTES": "lots"}, clear=True),
            pytest.raises(ValueError),
        ):
            ExtractionConfig.from_env()

    def test_unknown_flag_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"S1_VALIDATE_GEOMETRY": "maybe"}, clear=True),
            pytest.raises(ConfigValidationError, match="S1_VALIDATE_GEOMETRY"),
        ):
            ExtractionConfig.from_env()

    def test_error_attributes(self) -> None:
        err = ConfigValidationError("S1_MAX_INPUT_BYTES", -1, "must be > 0 (bytes)")
        assert err.key == "S1_MAX_INPUT_BYTES"
        assert err.value == -1
        assert err.reason == "must be > 0 (bytes)"
        assert err.stage == "config"
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert str(err) == "Invalid configuration S1_MAX_INPUT_BYTES=-1: must be > 0 (bytes)"
