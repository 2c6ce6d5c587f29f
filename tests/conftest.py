"""Shared pytest fixtures for the Sentinel-1 metadata test suite."""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


# ---------------------------------------------------------------------------
# Sample product XML fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def modern_xml(data_dir: Path) -> str:
    """Current-schema OCN product, ascending pass."""
    return (data_dir / "modern_product.xml").read_text(encoding="utf-8")


@pytest.fixture()
def modern_descending_xml(data_dir: Path) -> str:
    """Current-schema GRD product, descending pass."""
    return (data_dir / "modern_product_descending.xml").read_text(encoding="utf-8")


@pytest.fixture()
def legacy_xml(data_dir: Path) -> str:
    """Legacy annotation with ``adsHeader`` and a 2x3 geolocation grid."""
    return (data_dir / "legacy_annotation.xml").read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Expected footprints
# ---------------------------------------------------------------------------

# Corners of modern_product.xml footprint, in SAFE order
MODERN_A = (-161.306549, 21.163258)
MODERN_B = (-158.915909, 21.585093)
MODERN_C = (-158.623169, 20.077986)
MODERN_D = (-160.989746, 19.652864)

# Corners of modern_product_descending.xml footprint, in SAFE order
DESC_A = (1.512345, 44.123456)
DESC_B = (4.701234, 44.534567)
DESC_C = (5.012345, 43.012345)
DESC_D = (1.890123, 42.601234)

# Raster corners of legacy_annotation.xml grid
# (first line/first pixel, first/last, last/last, last/first)
LEGACY_A = (10.0, 46.0)
LEGACY_B = (4.0, 46.6)
LEGACY_C = (3.6, 44.8)
LEGACY_D = (9.5, 44.2)


def assert_ring_equal(
    actual: list[tuple[float, float]], expected: list[tuple[float, float]]
) -> None:
    """Compare two rings vertex by vertex with float tolerance."""
    assert len(actual) == len(expected)
    for got, want in zip(actual, expected, strict=True):
        assert got == pytest.approx(want)
