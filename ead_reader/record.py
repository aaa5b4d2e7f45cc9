from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lxml import etree

from .context import RecordLog
from .date import parse_date_range
from .date.format import append_year_range, date_range_to_str, extract_year, validate_iso8601, year_range_label

COMPONENT_TAGS = {"archdesc", "c"} | {f"c{i:02d}" for i in range(1, 13)}
TITLE_FIELDS = ("title_full", "title_sort", "title", "title_short")
DIGITIZABLE_FORMATS = ("collection", "series", "fonds", "item")
NO_KNOWN_RESTRICTIONS = "No known copyright restrictions"


def _path(path: str) -> str:
    # Match elements with or without the EAD namespace.
    return "/".join(f"{{*}}{step}" for step in path.split("/"))


def _localname(el: etree._Element) -> str:
    return etree.QName(el).localname


def _text(el: etree._Element | None) -> str:
    if el is None:
        return ""
    return " ".join("".join(el.itertext()).split())


def _attr(el: etree._Element, name: str) -> str:
    """Attribute value by local name (`href` also finds `xlink:href`)."""
    for key, value in el.attrib.items():
        if etree.QName(key).localname == name:
            return value
    return ""


def _find_component(root: etree._Element) -> etree._Element | None:
    if isinstance(root.tag, str) and _localname(root) in COMPONENT_TAGS:
        return root
    return root.find(".//" + _path("archdesc"))


@dataclass
class EadRecord:
    """A single EAD component (archdesc or c) mapped to a Solr document."""

    doc: etree._Element
    source_id: str
    ctx: RecordLog = field(init=False)

    def __post_init__(self) -> None:
        self.ctx = RecordLog(source_id=self.source_id, record_id=self.get_id())

    @classmethod
    def from_xml(cls, xml: bytes | str, source_id: str) -> "EadRecord":
        if isinstance(xml, str):
            xml = xml.encode("utf-8")
        root = etree.fromstring(xml)
        doc = _find_component(root)
        if doc is None:
            raise ValueError(f"No archdesc or c element in EAD document (root: {_localname(root)})")
        return cls(doc=doc, source_id=source_id)

    @property
    def warnings(self) -> list[str]:
        return self.ctx.warnings

    def find(self, path: str) -> etree._Element | None:
        return self.doc.find(_path(path))

    def findall(self, path: str) -> list[etree._Element]:
        return self.doc.findall(_path(path))

    def get_id(self) -> str:
        return self.doc.get("id") or _text(self.find("did/unitid"))

    def base_fields(self) -> dict[str, Any]:
        """Fields every EAD component carries before the date/rights enrichment."""
        data: dict[str, Any] = {"id": f"{self.source_id}.{self.get_id()}"}

        title = _text(self.find("did/unittitle"))
        for name in TITLE_FIELDS:
            data[name] = title

        level = self.doc.get("level")
        if level:
            data["format"] = level

        institution = _text(self.find("did/repository/corpname")) or _text(self.find("did/repository"))
        if institution:
            data["institution"] = institution

        add_data = self.find("add-data")
        if add_data is not None and add_data.get("sequence"):
            data["hierarchy_sequence"] = add_data.get("sequence")

        return data

    def to_solr_dict(self) -> dict[str, Any]:
        data = self.base_fields()

        rng = parse_date_range(_text(self.find("did/unitdate")), self.ctx)
        data["unit_daterange"] = data["search_daterange_mv"] = date_range_to_str(rng)
        if rng is not None:
            data["main_date_str"] = extract_year(rng.start)
            main_date = self.validate_date(rng.start)
            if main_date:
                data["main_date"] = main_date

            label = year_range_label(rng)
            if label:
                for name in TITLE_FIELDS:
                    data[name] = append_year_range(data[name], label)

        if "hierarchy_sequence" in data:
            data["hierarchy_sequence_str"] = data["hierarchy_sequence"]

        data["source_str_mv"] = data.get("institution", self.source_id)
        data["datasource_str_mv"] = self.source_id

        daogrp = self.find("did/daogrp")
        if daogrp is not None:
            if data.get("format") in DIGITIZABLE_FORMATS:
                data["format"] = "digitized_" + data["format"]
            for daoloc in daogrp.findall(_path("daoloc")):
                if _attr(daoloc, "href"):
                    data["online_boolean"] = True
                    # Online availability is per source, not per datasource.
                    data["online_str_mv"] = data["source_str_mv"]
                    break

        for name, path in (("identifier", "did/unitid"), ("measurements", "did/dimensions"), ("material", "did/physdesc")):
            value = _text(self.find(path))
            if value:
                data[name] = value

        rights = self.get_rights()
        if rights:
            data["rights"] = rights

        data["usage_rights_str_mv"] = self.get_usage_rights()

        return {k: v for k, v in data.items() if v not in ("", None, [])}

    def validate_date(self, value: str) -> str | None:
        if validate_iso8601(value):
            return value
        self.ctx.log("Ead", f"Invalid date {value}, record {self.ctx.describe()}")
        self.ctx.record_warning("invalid date")
        return None

    def get_rights(self) -> str:
        for path in ("userestrict/p", "did/userestrict/p", "accessrestrict/p", "did/accessrestrict/p"):
            value = _text(self.find(path))
            if value:
                return value
        return ""

    def get_usage_rights(self) -> list[str]:
        """["No known copyright restrictions"] when the record says so, else ["restricted"]."""
        for path in ("userestrict/p", "accessrestrict/p"):
            for p in self.findall(path):
                if NO_KNOWN_RESTRICTIONS in _text(p):
                    return [NO_KNOWN_RESTRICTIONS]
        return ["restricted"]
