from __future__ import annotations

import pytest
from lxml import etree

from ead_reader.record import EadRecord

FONDS = b"""<?xml version="1.0" encoding="UTF-8"?>
<ead xmlns="urn:isbn:1-931666-22-9" xmlns:xlink="http://www.w3.org/1999/xlink">
  <eadheader><eadid>fa-1</eadid></eadheader>
  <archdesc level="fonds" id="fa-1">
    <did>
      <unittitle>Letters of the  family</unittitle>
      <unitid>FA 1</unitid>
      <unitdate>1.3.1950 - 4.3.1950</unitdate>
      <repository><corpname>City Archives</corpname></repository>
      <physdesc>paper</physdesc>
      <dimensions>2 boxes</dimensions>
      <daogrp>
        <daoloc/>
        <daoloc xlink:href="http://example.org/img/1.jpg"/>
      </daogrp>
    </did>
    <userestrict><p>No known copyright restrictions.</p></userestrict>
    <add-data sequence="000001"/>
  </archdesc>
</ead>
"""


def _component(unitdate: str, title: str = "Photo", level: str = "item") -> bytes:
    return (
        f'<c level="{level}" id="x1"><did><unittitle>{title}</unittitle>'
        f"<unitdate>{unitdate}</unitdate></did>"
        f"<accessrestrict><p>Closed until 2030.</p></accessrestrict></c>"
    ).encode("utf-8")


def test_fonds_to_solr_dict() -> None:
    rec = EadRecord.from_xml(FONDS, "test")
    data = rec.to_solr_dict()

    assert data["id"] == "test.fa-1"
    for name in ("title", "title_short", "title_full", "title_sort"):
        assert data[name] == "Letters of the family (1950)"
    assert data["unit_daterange"] == "[1950-03-01 TO 1950-03-04]"
    assert data["search_daterange_mv"] == data["unit_daterange"]
    assert data["main_date_str"] == "1950"
    assert data["main_date"] == "1950-03-01T00:00:00Z"
    assert data["format"] == "digitized_fonds"
    assert data["online_boolean"] is True
    assert data["online_str_mv"] == "City Archives"
    assert data["source_str_mv"] == "City Archives"
    assert data["datasource_str_mv"] == "test"
    assert data["identifier"] == "FA 1"
    assert data["measurements"] == "2 boxes"
    assert data["material"] == "paper"
    assert data["rights"] == "No known copyright restrictions."
    assert data["usage_rights_str_mv"] == ["No known copyright restrictions"]
    assert data["hierarchy_sequence_str"] == "000001"
    assert rec.warnings == []


def test_component_with_year_range() -> None:
    data = EadRecord.from_xml(_component("1950-1960"), "test").to_solr_dict()

    assert data["title"] == "Photo (1950-1960)"
    assert data["unit_daterange"] == "[1950-01-01 TO 1960-12-31]"
    assert data["format"] == "item"
    assert data["source_str_mv"] == "test"
    assert data["rights"] == "Closed until 2030."
    assert data["usage_rights_str_mv"] == ["restricted"]
    assert "online_boolean" not in data


def test_inverted_range_is_repaired_and_warned() -> None:
    rec = EadRecord.from_xml(_component("1960-1950"), "test")
    data = rec.to_solr_dict()

    assert data["unit_daterange"] == "[1960-01-01 TO 1960-12-31]"
    assert data["title"] == "Photo (1960)"
    assert rec.warnings == ["invalid date range"]


def test_title_already_carrying_years_is_left_alone() -> None:
    data = EadRecord.from_xml(_component("1950", title="Photo 1950"), "test").to_solr_dict()
    assert data["title"] == "Photo 1950"
    assert data["unit_daterange"] == "[1950-01-01 TO 1950-12-31]"


def test_undated_component_has_no_date_fields() -> None:
    rec = EadRecord.from_xml(_component("-"), "test")
    data = rec.to_solr_dict()

    assert "unit_daterange" not in data
    assert "main_date" not in data
    assert data["title"] == "Photo"
    assert rec.warnings == []


def test_invalid_end_date_is_recorded() -> None:
    rec = EadRecord.from_xml(_component("13.1950"), "test")
    data = rec.to_solr_dict()

    assert "unit_daterange" not in data
    assert rec.warnings == ["invalid end date"]


def test_short_numeric_range_has_no_main_date() -> None:
    rec = EadRecord.from_xml(_component("5-10"), "test")
    data = rec.to_solr_dict()

    assert data["unit_daterange"] == "[5-01-01 TO 10-12-31]"
    assert "main_date" not in data
    assert rec.warnings == ["invalid date"]


def test_document_without_component_raises() -> None:
    with pytest.raises(ValueError):
        EadRecord.from_xml(b"<ead><eadheader/></ead>", "test")


def test_malformed_xml_raises() -> None:
    with pytest.raises(etree.XMLSyntaxError):
        EadRecord.from_xml("<ead><archdesc>", "test")
