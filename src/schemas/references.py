"""Reference contracts parsed from a record's references field."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from schemas.metadata import Metadata

REFERENCE_TYPES: dict[str, str] = {
    "http://schema.org/url": "url",
    "http://schema.org/downloadUrl": "download",
    "http://schema.org/thumbnailUrl": "thumbnail",
    "http://www.opengis.net/def/serviceType/ogc/wms": "wms",
    "http://www.opengis.net/def/serviceType/ogc/wfs": "wfs",
    "http://www.opengis.net/def/serviceType/ogc/wcs": "wcs",
    "http://www.opengis.net/def/serviceType/ogc/wmts": "wmts",
    "https://wiki.osgeo.org/wiki/Tile_Map_Service_Specification": "tms",
    "https://wiki.openstreetmap.org/wiki/Slippy_map_tilenames": "xyz",
    "https://github.com/mapbox/tilejson-spec": "tilejson",
    "https://github.com/protomaps/PMTiles": "pmtiles",
    "https://github.com/cogeotiff/cog-spec": "cog",
    "https://oembed.com": "oembed",
    "https://openindexmaps.org": "index_map",
    "http://iiif.io/api/image": "iiif",
    "http://iiif.io/api/presentation#manifest": "iiif_manifest",
    "urn:x-esri:serviceType:ArcGIS#FeatureLayer": "feature_layer",
    "urn:x-esri:serviceType:ArcGIS#TiledMapLayer": "tiled_map_layer",
    "urn:x-esri:serviceType:ArcGIS#DynamicMapLayer": "dynamic_map_layer",
    "urn:x-esri:serviceType:ArcGIS#ImageMapLayer": "image_map_layer",
    "http://lccn.loc.gov/sh85035852": "data_dictionary",
    "http://www.isotc211.org/schemas/2005/gmd/": "iso19139",
    "http://www.opengis.net/cat/csw/csdgm": "fgdc",
    "http://www.loc.gov/mods/v3": "mods",
    "http://www.w3.org/1999/xhtml": "html",
}

METADATA_TYPES = ("iso19139", "fgdc", "mods", "html")


class Reference(BaseModel):
    """A named external service or resource attached to a record."""

    uri: str
    endpoint: str

    model_config = ConfigDict(frozen=True)

    @property
    def type(self) -> Optional[str]:
        return REFERENCE_TYPES.get(self.uri)


class References:
    """Ordered references of one record, addressable by reference type."""

    def __init__(
        self,
        refs: list[Reference] | None = None,
        *,
        metadata_loader: Callable[[str], str] | None = None,
    ):
        self.refs = list(refs or [])
        self.metadata_loader = metadata_loader

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping[str, Any] | str | None,
        *,
        metadata_loader: Callable[[str], str] | None = None,
    ) -> "References":
        """Build from a ``{uri: endpoint}`` mapping or its JSON encoding."""
        if raw is None or raw == "":
            return cls(metadata_loader=metadata_loader)
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise ValueError(f"References must be a JSON object: {exc}") from exc
        if not isinstance(raw, Mapping):
            raise ValueError("References must be a mapping of URI to endpoint")

        refs: list[Reference] = []
        for uri, endpoint in raw.items():
            # multi-valued references (e.g. several downloads) keep the first
            if isinstance(endpoint, list):
                if not endpoint:
                    continue
                endpoint = endpoint[0]
                if isinstance(endpoint, Mapping):
                    endpoint = endpoint.get("url", "")
            refs.append(Reference(uri=str(uri), endpoint=str(endpoint)))
        return cls(refs, metadata_loader=metadata_loader)

    def get(self, ref_type: str) -> Optional[Reference]:
        for ref in self.refs:
            if ref.type == ref_type:
                return ref
        return None

    def __getattr__(self, name: str) -> Optional[Reference]:
        if name.startswith("_") or name in ("refs", "metadata_loader"):
            raise AttributeError(name)
        return self.get(name)

    def __contains__(self, ref_type: object) -> bool:
        return any(ref.type == ref_type for ref in self.refs)

    def __iter__(self):
        return iter(self.refs)

    def __len__(self) -> int:
        return len(self.refs)

    @property
    def shown_metadata(self) -> list["Metadata"]:
        from schemas.metadata import Metadata

        return [
            Metadata(ref, loader=self.metadata_loader)
            for ref in self.refs
            if ref.type in METADATA_TYPES
        ]


__all__ = ["METADATA_TYPES", "REFERENCE_TYPES", "Reference", "References"]
