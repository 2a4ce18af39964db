"""Document contracts consumed by the view helpers."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field

from core.config import FieldSettings, get_settings
from schemas.references import Reference, References

logger = logging.getLogger(__name__)

VIEWER_PROTOCOLS = (
    "oembed",
    "index_map",
    "tilejson",
    "xyz",
    "wmts",
    "tms",
    "pmtiles",
    "cog",
    "wms",
    "iiif",
    "iiif_manifest",
    "tiled_map_layer",
    "dynamic_map_layer",
    "image_map_layer",
    "feature_layer",
)

_ENVELOPE = re.compile(
    r"^\s*ENVELOPE\(\s*([-\d.eE+]+)\s*,\s*([-\d.eE+]+)\s*,\s*([-\d.eE+]+)\s*,\s*([-\d.eE+]+)\s*\)\s*$",
    re.IGNORECASE,
)


class Geometry:
    """Record geometry exposed as a GeoJSON string for map widgets."""

    def __init__(self, raw: Any):
        self.raw = raw

    @property
    def geojson(self) -> str:
        raw = self.raw
        if raw is None or raw == "":
            return ""
        if isinstance(raw, Mapping):
            return json.dumps(raw, separators=(",", ":"))

        text = str(raw)
        match = _ENVELOPE.match(text)
        if match:
            west, east, north, south = (float(value) for value in match.groups())
            polygon = {
                "type": "Polygon",
                "coordinates": [
                    [[west, south], [east, south], [east, north], [west, north], [west, south]]
                ],
            }
            return json.dumps(polygon, separators=(",", ":"))

        try:
            parsed = json.loads(text)
        except json.JSONDecodeError:
            logger.debug("Unsupported geometry value: %s", text)
            return ""
        if isinstance(parsed, dict) and "type" in parsed:
            return json.dumps(parsed, separators=(",", ":"))
        logger.debug("Unsupported geometry value: %s", text)
        return ""


class ItemViewer:
    """Picks the map protocol for a record from its references."""

    def __init__(self, references: References):
        self.references = references

    def __getattr__(self, name: str) -> Optional[Reference]:
        if name in VIEWER_PROTOCOLS:
            return self.references.get(name)
        raise AttributeError(name)

    @property
    def viewer_reference(self) -> Optional[Reference]:
        for protocol in VIEWER_PROTOCOLS:
            ref = self.references.get(protocol)
            if ref is not None:
                return ref
        return None

    @property
    def viewer_protocol(self) -> str:
        ref = self.viewer_reference
        return ref.type if ref is not None and ref.type else "map"

    @property
    def viewer_endpoint(self) -> str:
        ref = self.viewer_reference
        return ref.endpoint if ref is not None else ""


class DocumentLike(Protocol):
    """Read-only surface the helpers need from an indexed record."""

    id: str

    @property
    def is_public(self) -> bool: ...

    @property
    def is_same_institution(self) -> bool: ...

    @property
    def is_downloadable(self) -> bool: ...

    @property
    def is_inspectable(self) -> bool: ...

    @property
    def viewer_protocol(self) -> str: ...

    @property
    def viewer_endpoint(self) -> str: ...

    @property
    def wxs_identifier(self) -> str: ...

    @property
    def geometry(self) -> Geometry: ...

    @property
    def references(self) -> References: ...

    @property
    def item_viewer(self) -> ItemViewer: ...

    def __getitem__(self, field: str) -> Any: ...


class GeoDocument(BaseModel):
    """An indexed geospatial record."""

    id: str
    access_rights: Optional[str] = None
    provider: Optional[str] = None
    institution: Optional[str] = None
    wxs_identifier: str = ""
    geometry_value: Any = None
    record: dict[str, Any] = Field(default_factory=dict)
    references: References = Field(default_factory=References)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        *,
        fields: FieldSettings | None = None,
        institution: str | None = None,
        metadata_loader=None,
    ) -> "GeoDocument":
        """Build a document from a flat index record using configured field names."""
        settings = get_settings()
        fields = fields or settings.record_fields
        if institution is None:
            institution = settings.institution

        doc_id = record.get(fields.id)
        if doc_id is None or doc_id == "":
            raise ValueError(f"Record is missing its identifier field: {fields.id}")

        return cls(
            id=str(doc_id),
            access_rights=record.get(fields.access_rights),
            provider=record.get(fields.provider),
            institution=institution,
            wxs_identifier=record.get(fields.wxs_identifier) or "",
            geometry_value=record.get(fields.geometry),
            record=dict(record),
            references=References.from_mapping(
                record.get(fields.references), metadata_loader=metadata_loader
            ),
        )

    def __getitem__(self, field: str) -> Any:
        return self.record.get(field)

    @property
    def is_public(self) -> bool:
        return str(self.access_rights or "").lower() == "public"

    @property
    def is_same_institution(self) -> bool:
        if not self.provider or not self.institution:
            return False
        return self.provider.lower() == self.institution.lower()

    @property
    def is_downloadable(self) -> bool:
        refs = self.references
        return "download" in refs or "iiif" in refs or ("wms" in refs and "wfs" in refs)

    @property
    def is_inspectable(self) -> bool:
        return "wfs" in self.references

    @property
    def geometry(self) -> Geometry:
        return Geometry(self.geometry_value)

    @property
    def item_viewer(self) -> ItemViewer:
        return ItemViewer(self.references)

    @property
    def viewer_protocol(self) -> str:
        return self.item_viewer.viewer_protocol

    @property
    def viewer_endpoint(self) -> str:
        return self.item_viewer.viewer_endpoint


__all__ = ["DocumentLike", "GeoDocument", "Geometry", "ItemViewer", "VIEWER_PROTOCOLS"]
