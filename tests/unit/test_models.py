"""Tests for the record models.

Covers:
- ProductProperties: validation, instrument omission, cloud cover
- FeatureRecord: GeoJSON serialisation, deserialisation, helpers
- ProductDocument: text lookup
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from s1_metadata.models.contracts import FeatureStore
from s1_metadata.models.document import ProductDocument
from s1_metadata.models.feature import FeatureRecord
from s1_metadata.models.properties import ProductProperties


def _properties(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "productIdentifier": "S1A_T",
        "title": "S1A_T",
        "resourceSize": "10",
        "authority": "ESA",
        "startDate": "2015-07-27T04:47:06.611",
        "completionDate": "2015-07-27T04:47:31.061",
        "productType": "OCN",
        "processingLevel": "2",
        "platform": "S1A",
        "sensorMode": "IW",
        "orbitNumber": "6992",
        "orbitDirection": "ascending",
        "swath": "IW",
        "polarisation": "VV VH",
        "missionTakeId": "38865",
        "instrument": "SAR-C",
        "location": "2015/07/27/S1A/S1A_T",
        "cloudCover": 0,
    }
    data.update(overrides)
    return data


RING = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)]


class TestProductProperties:
    def test_valid(self) -> None:
        props = ProductProperties(**_properties())
        assert props.orbitDirection == "ascending"

    def test_dump_keeps_instrument(self) -> None:
        assert ProductProperties(**_properties()).to_dict()["instrument"] == "SAR-C"

    def test_dump_drops_unset_instrument(self) -> None:
        data = _properties()
        del data["instrument"]
        assert "instrument" not in ProductProperties(**data).to_dict()

    def test_orbit_direction_dumped_as_text(self) -> None:
        dumped = ProductProperties(**_properties(orbitDirection="descending")).to_dict()
        assert dumped["orbitDirection"] == "descending"
        assert type(dumped["orbitDirection"]) is str

    def test_upper_case_orbit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProductProperties(**_properties(orbitDirection="ASCENDING"))

    def test_non_zero_cloud_cover_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cloudCover"):
            ProductProperties(**_properties(cloudCover=12))

    def test_other_authority_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProductProperties(**_properties(authority="NASA"))

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProductProperties(**_properties(quicklook="x"))

    def test_defaults(self) -> None:
        data = _properties()
        del data["authority"]
        del data["cloudCover"]
        props = ProductProperties(**data)
        assert props.authority == "ESA"
        assert props.cloudCover == 0


class TestFeatureRecord:
    def test_to_dict(self) -> None:
        record = FeatureRecord(geometry=[RING], properties={"title": "T"})
        assert record.to_dict() == {
            "type": "Feature",
            "geometry": {
                "type": "Polygon",
                "coordinates": [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [0.0, 0.0]]],
            },
            "properties": {"title": "T"},
        }

    def test_from_dict_restores_record(self) -> None:
        record = FeatureRecord(geometry=[RING], properties={"title": "T", "cloudCover": 0})
        assert FeatureRecord.from_dict(dict(record.to_dict())) == record

    def test_from_dict_bad_geometry(self) -> None:
        with pytest.raises(TypeError, match="geometry"):
            FeatureRecord.from_dict({"geometry": "POLYGON"})

    def test_from_dict_bad_properties(self) -> None:
        with pytest.raises(TypeError, match="properties"):
            FeatureRecord.from_dict({"geometry": {"coordinates": []}, "properties": []})

    def test_exterior_and_vertex_count(self) -> None:
        record = FeatureRecord(geometry=[RING])
        assert record.exterior == RING
        assert record.vertex_count == 5

    def test_empty_record(self) -> None:
        assert FeatureRecord().exterior == []
        assert FeatureRecord().vertex_count == 0

    def test_frozen(self) -> None:
        record = FeatureRecord()
        with pytest.raises(AttributeError):
            record.properties = {}  # type: ignore[misc]


class TestProductDocument:
    def test_text_stripped(self) -> None:
        doc = ProductDocument(root_tag="p", elements={"a": "  x \n"})
        assert doc.text("a") == "x"

    def test_text_absent(self) -> None:
        assert ProductDocument(root_tag="p").text("a") is None

    def test_has_element(self) -> None:
        doc = ProductDocument(root_tag="p", elements={"a": ""})
        assert doc.has_element("a")
        assert not doc.has_element("b")


class TestFeatureStoreProtocol:
    def test_structural_match(self) -> None:
        class MemoryStore:
            def store(self, record: FeatureRecord, collection_name: str) -> bool:
                return True

        assert isinstance(MemoryStore(), FeatureStore)

    def test_non_store(self) -> None:
        assert not isinstance(object(), FeatureStore)
