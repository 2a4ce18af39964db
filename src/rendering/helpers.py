"""View helpers for record pages: download links, map viewers, labels and partials."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
from urllib.parse import quote, urlencode

from jinja2 import Environment, TemplateNotFound
from markupsafe import Markup

from core.config import Settings, get_settings
from geoblacklight import logger as gbl_logger
from rendering.i18n import MissingTranslation, Translator
from rendering.icons import IconLibrary, IconNotFound
from rendering.markup import content_tag, link_to
from rendering.partials import PartialRenderer
from schemas.document import DocumentLike
from schemas.metadata import Metadata, TransformError
from schemas.references import Reference
from utils.text import camelize, flatten, is_blank, join_values, parameterize, truncate

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 150
IIIF_INFO_SUFFIX = "info.json"
IIIF_FULL_JPG_SUFFIX = "full/full/0/default.jpg"


@dataclass
class Routes:
    """URL builders for the catalog and download endpoints."""

    catalog_path: str = "/catalog"
    download_base: str = "/download"

    def search_catalog_path(self) -> str:
        return self.catalog_path

    def download_path(self, doc_id: str, type: str | None = None) -> str:
        path = f"{self.download_base}/{quote(str(doc_id), safe='')}"
        if type:
            path = f"{path}?{urlencode({'type': type})}"
        return path

    def download_hgl_path(self, doc_id: str) -> str:
        return f"{self.download_base}/hgl/{quote(str(doc_id), safe='')}"


@dataclass
class ViewContext:
    """Per-request state and collaborators the helpers read from."""

    document: Optional[DocumentLike] = None
    user_signed_in: bool = False
    locale: Optional[str] = None
    controller_name: str = "catalog"
    settings: Settings = field(default_factory=get_settings)
    translator: Optional[Translator] = None
    icons: Optional[IconLibrary] = None
    partials: Optional[PartialRenderer] = None
    routes: Routes = field(default_factory=Routes)

    def __post_init__(self) -> None:
        if self.translator is None:
            self.translator = Translator(
                self.settings.locale_dir, default_locale=self.settings.default_locale
            )
        if self.icons is None:
            self.icons = IconLibrary(self.settings.icon_dir)
        if self.partials is None:
            self.partials = PartialRenderer(self.settings.template_dir)
        if self.locale is None:
            self.locale = self.settings.default_locale


class GeoblacklightHelper:
    """Helpers bound to one request context."""

    def __init__(self, context: ViewContext):
        self.context = context

    @property
    def document(self) -> Optional[DocumentLike]:
        return self.context.document

    @property
    def settings(self) -> Settings:
        return self.context.settings

    def t(self, key: str, **values: Any) -> Any:
        """Translate ``key``; a missing entry renders a ``translation_missing`` span."""
        try:
            return self.context.translator.translate(key, self.context.locale, **values)
        except MissingTranslation as exc:
            label = " ".join(word.capitalize() for word in key.rsplit(".", 1)[-1].split("_"))
            return content_tag("span", label, class_="translation_missing", title=str(exc))

    # Access

    def document_available(self) -> bool:
        document = self.document
        if document is None:
            return False
        return bool(
            document.is_public
            or (document.is_same_institution and self.context.user_signed_in)
        )

    def document_downloadable(self) -> bool:
        return self.document_available() and bool(self.document.is_downloadable)

    def show_attribute_table(self) -> bool:
        return self.document_available() and bool(self.document.is_inspectable)

    # Download links

    def iiif_jpg_url(self) -> Optional[str]:
        ref = self.document.references.iiif if self.document is not None else None
        if ref is None:
            return None
        return ref.endpoint.replace(IIIF_INFO_SUFFIX, IIIF_FULL_JPG_SUFFIX, 1)

    def download_link_file(self, label: Any, doc_id: str, url: str) -> Markup:
        return link_to(
            label,
            url,
            contentUrl=url,
            data={"download": "trigger", "download_type": "direct", "download_id": doc_id},
        )

    def download_link_hgl(self, text: Any, document: DocumentLike) -> Markup:
        return link_to(
            text,
            self.context.routes.download_hgl_path(document.id),
            data={
                "blacklight_modal": "trigger",
                "download": "trigger",
                "download_type": "harvard-hgl",
                "download_id": document.id,
            },
        )

    def download_link_iiif(self) -> Markup:
        """Link to the full-size JPEG rendition of the record's IIIF image."""
        url = self.iiif_jpg_url()
        return link_to(
            self.download_text("JPG"),
            url,
            contentUrl=url,
            data={"download": "trigger"},
        )

    def download_link_generated(self, download_type: str, document: DocumentLike) -> Markup:
        label = self.t(
            "geoblacklight.download.export_link",
            download_format=self.export_format_label(download_type),
        )
        return link_to(
            label,
            "",
            data={
                "download_path": self.context.routes.download_path(document.id, type=download_type),
                "download": "trigger",
                "download_type": download_type,
                "download_id": document.id,
            },
        )

    # Labels

    def proper_case_format(self, format: Any) -> Any:
        return self.t(f"geoblacklight.formats.{parameterize(format, separator='_')}")

    def export_format_label(self, format: Any) -> Any:
        return self.t(
            f"geoblacklight.download.export_{parameterize(format, separator='_')}_link"
        )

    def formatted_name_reference(self, reference: Any) -> Any:
        return self.t(f"geoblacklight.references.{reference}")

    def download_text(self, format: Any) -> Markup:
        value = self.t(
            "geoblacklight.download.download_link",
            download_format=self.proper_case_format(format),
        )
        return Markup(value)

    # Field values

    def snippit(self, args: Mapping[str, Any]) -> str:
        """Join a field's values and cap them at 150 characters for result lists."""
        return truncate(join_values(args.get("value")), length=SNIPPET_LENGTH)

    def render_value_as_truncate_abstract(self, args: Mapping[str, Any]) -> Markup:
        return content_tag("div", join_values(args.get("value")), class_="truncate-abstract")

    def render_references_url(self, args: Mapping[str, Any]) -> Optional[Markup]:
        document = args.get("document")
        ref = document.references.url if document is not None else None
        if ref is None:
            return None
        return link_to(ref.endpoint, ref.endpoint)

    # Icons

    def geoblacklight_icon(self, name: Any, **options: Any) -> Markup:
        """Inline SVG icon, or an empty placeholder span when no icon exists."""
        icon_name = parameterize(name) if name is not None else "none"
        try:
            return self.context.icons.render(icon_name, **options)
        except IconNotFound as exc:
            logger.debug("Icon fallback for %r: %s", name, exc)
            return content_tag("span", class_="icon-missing geoblacklight-none")

    def relations_icon(self, document: DocumentLike, icon: Any) -> Markup:
        use_geom = self.settings.use_geom_for_relations_icon
        icon_name = None
        if use_geom:
            values = flatten(document[self.settings.record_fields.geom_type])
            icon_name = values[0] if values else None
        if is_blank(icon_name):
            icon_name = icon
        options = {"classes": "svg_tooltip"} if use_geom else {}
        return self.geoblacklight_icon(icon_name, **options)

    # Help text

    def show_help_text(self, feature: str, key: str) -> bool:
        keys = self.settings.help_text.get(feature)
        return bool(keys) and key in keys

    def render_help_text_entry(self, feature: str, key: str) -> Markup:
        translation_key = f"geoblacklight.help_text.{feature}.{key}"
        translator = self.context.translator
        if not translator.exists(translation_key, self.context.locale):
            return content_tag("span", class_="help-text translation-missing")

        help_text = translator.translate(translation_key, self.context.locale)
        if isinstance(help_text, Mapping):
            title = help_text.get("title")
            content = help_text.get("content")
        else:
            title = content = str(help_text)
        trigger = content_tag(
            "a", title, data={"toggle": "popover", "title": title, "content": content}
        )
        return content_tag("h3", trigger, class_="help-text viewer_protocol h6")

    # Maps

    def render_sidebar_map(self, document: DocumentLike) -> bool:
        protocols = self.settings.sidebar_static_map or []
        return document.viewer_protocol in protocols

    def geoblacklight_basemap(self) -> str:
        return self.settings.basemap_provider or "positron"

    def leaflet_options(self) -> dict[str, Any]:
        return self.settings.leaflet

    def results_js_map_selector(self, controller_name: str) -> str:
        if controller_name == "bookmarks":
            return "bookmarks"
        return "index"

    def openlayers_container(self) -> bool:
        """True when the record's viewer needs the OpenLayers widget (PMTiles or COG)."""
        if self.document is None:
            return False
        viewer = self.document.item_viewer
        return bool(viewer.pmtiles or viewer.cog)

    def viewer_container(self) -> Markup:
        if self.openlayers_container():
            return self.ol_viewer()
        return self.leaflet_viewer()

    def leaflet_viewer(self) -> Markup:
        return content_tag("div", None, id="map", data=self._viewer_data())

    def ol_viewer(self) -> Markup:
        return content_tag("div", None, id="ol-map", data=self._viewer_data())

    def _viewer_data(self) -> dict[str, Any]:
        document = self.document
        return {
            "map": "item",
            "protocol": camelize(document.viewer_protocol),
            "url": document.viewer_endpoint,
            "layer-id": document.wxs_identifier,
            "map-geom": document.geometry.geojson,
            "catalog-path": self.context.routes.search_catalog_path(),
            "available": self.document_available(),
            "basemap": self.geoblacklight_basemap(),
            "leaflet_options": self.leaflet_options(),
        }

    # Partials

    def render_web_services(self, reference: Reference) -> Markup:
        partials = self.context.partials
        try:
            return partials.render(
                f"web_services_{reference.type}", reference=reference, h=self
            )
        except TemplateNotFound:
            logger.debug("No web services partial for %s, using default", reference.type)
            return partials.render("web_services_default", reference=reference, h=self)

    def render_transformed_metadata(self, metadata: Metadata) -> Markup:
        """Render transformed metadata, falling back to raw XML, then to a notice."""
        partials = self.context.partials
        try:
            content = Markup(metadata.transform())
            return partials.render("catalog/metadata/content", content=content, h=self)
        except TransformError as transform_err:
            gbl_logger.warning(str(transform_err))
            return partials.render(
                "catalog/metadata/markup", content=metadata.to_xml(), h=self
            )
        except Exception as err:
            gbl_logger.warning(str(err))
            return partials.render("catalog/metadata/missing", h=self)

    def first_metadata(self, document: DocumentLike, metadata: Metadata) -> bool:
        shown = document.references.shown_metadata
        return bool(shown) and shown[0].type == metadata.type


HELPER_NAMES = (
    "t",
    "document_available",
    "document_downloadable",
    "show_attribute_table",
    "iiif_jpg_url",
    "download_link_file",
    "download_link_hgl",
    "download_link_iiif",
    "download_link_generated",
    "proper_case_format",
    "export_format_label",
    "formatted_name_reference",
    "download_text",
    "snippit",
    "render_value_as_truncate_abstract",
    "render_references_url",
    "geoblacklight_icon",
    "relations_icon",
    "show_help_text",
    "render_help_text_entry",
    "render_sidebar_map",
    "geoblacklight_basemap",
    "leaflet_options",
    "results_js_map_selector",
    "openlayers_container",
    "viewer_container",
    "leaflet_viewer",
    "ol_viewer",
    "render_web_services",
    "render_transformed_metadata",
    "first_metadata",
)


def register_helpers(env: Environment, helper: GeoblacklightHelper) -> Environment:
    """Expose every helper (and the helper itself as ``h``) as Jinja2 globals."""
    env.globals["h"] = helper
    for name in HELPER_NAMES:
        env.globals[name] = getattr(helper, name)
    return env


__all__ = [
    "HELPER_NAMES",
    "GeoblacklightHelper",
    "Routes",
    "ViewContext",
    "register_helpers",
]
