"""Application configuration and .env loading."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HELP_TEXT_VIEWER_PROTOCOLS = [
    "dynamic_map_layer",
    "feature_layer",
    "iiif",
    "iiif_manifest",
    "image_map_layer",
    "index_map",
    "tiled_map_layer",
    "wms",
    "tms",
    "oembed",
    "pmtiles",
    "cog",
    "xyz",
    "wmts",
    "tilejson",
]


def _default_leaflet() -> dict[str, Any]:
    return {
        "MAP": {},
        "LAYERS": {
            "DETECT_RETINA": True,
            "INDEX": {
                "DEFAULT": {"color": "#7FCDBB", "weight": 1, "radius": 4},
                "UNAVAILABLE": {"color": "#EDF8B1", "weight": 1, "radius": 4},
                "SELECTED": {"color": "#2C7FB8", "weight": 1, "radius": 4},
            },
        },
        "SLEEP": {"SLEEP": True, "HOVERTOWAKE": False, "SLEEPTIME": 750},
    }


class FieldSettings(BaseModel):
    """Names of the indexed record fields read by the document model."""

    id: str = "id"
    access_rights: str = "dct_accessRights_s"
    provider: str = "schema_provider_s"
    wxs_identifier: str = "gbl_wxsIdentifier_s"
    geometry: str = "locn_geometry"
    references: str = "dct_references_s"
    geom_type: str = "gbl_resourceType_sm"
    title: str = "dct_title_s"


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    help_text: dict[str, list[str]] = Field(
        default_factory=lambda: {"viewer_protocol": list(DEFAULT_HELP_TEXT_VIEWER_PROTOCOLS)},
        validation_alias="HELP_TEXT",
    )
    sidebar_static_map: list[str] = Field(
        default_factory=lambda: ["iiif", "iiif_manifest"],
        validation_alias="SIDEBAR_STATIC_MAP",
    )
    leaflet: dict[str, Any] = Field(
        default_factory=_default_leaflet, validation_alias="LEAFLET"
    )
    record_fields: FieldSettings = Field(
        default_factory=FieldSettings, validation_alias="FIELDS"
    )
    use_geom_for_relations_icon: bool = Field(
        default=False, validation_alias="USE_GEOM_FOR_RELATIONS_ICON"
    )
    basemap_provider: str | None = Field(
        default=None, validation_alias="BASEMAP_PROVIDER"
    )
    institution: str = Field(default="Stanford", validation_alias="INSTITUTION")

    default_locale: str = Field(default="en", validation_alias="DEFAULT_LOCALE")
    locale_dir: str | None = Field(default=None, validation_alias="LOCALE_DIR")
    icon_dir: str | None = Field(default=None, validation_alias="ICON_DIR")
    template_dir: str | None = Field(default=None, validation_alias="TEMPLATE_DIR")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once from .env/environment."""
    return Settings()


__all__ = ["FieldSettings", "Settings", "get_settings"]
