"""Metadata documents attached to a record and their HTML transforms."""

from __future__ import annotations

from typing import Callable, Optional

from jinja2 import Environment, select_autoescape
from lxml import etree

from schemas.references import Reference

Transformer = Callable[[str], str]


class TransformError(RuntimeError):
    """Raised when metadata cannot be transformed into HTML."""


class EmptyMetadataError(TransformError):
    """Raised when there is no metadata content to transform."""


class MetadataUnavailable(RuntimeError):
    """Raised when the metadata body cannot be obtained at all."""


_summary_env = Environment(autoescape=select_autoescape(default_for_string=True))
_SUMMARY_TEMPLATE = _summary_env.from_string(
    '<dl class="metadata-summary">'
    "{% for name, value in entries %}<dt>{{ name }}</dt><dd>{{ value }}</dd>{% endfor %}"
    "</dl>"
)


def transform_xml_summary(content: str) -> str:
    """Render every non-empty leaf element of an XML document as a definition list."""
    if not content or not content.strip():
        raise EmptyMetadataError("Empty metadata document")
    try:
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        root = etree.fromstring(content.encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError as exc:
        raise TransformError(f"Invalid metadata XML: {exc}") from exc

    entries = []
    for element in root.iter():
        # comments and processing instructions have non-string tags
        if not isinstance(element.tag, str) or len(element):
            continue
        text = (element.text or "").strip()
        if text:
            entries.append((etree.QName(element).localname, text))
    if not entries:
        raise EmptyMetadataError("Metadata document has no content")
    return _SUMMARY_TEMPLATE.render(entries=entries)


def transform_html(content: str) -> str:
    if not content or not content.strip():
        raise EmptyMetadataError("Empty metadata document")
    return content


class MetadataTransformer:
    """Registry of HTML transforms keyed by metadata type."""

    def __init__(self, transformers: dict[str, Transformer] | None = None):
        self.transformers: dict[str, Transformer] = {
            "iso19139": transform_xml_summary,
            "fgdc": transform_xml_summary,
            "mods": transform_xml_summary,
            "html": transform_html,
        }
        if transformers:
            self.transformers.update(transformers)

    def register(self, metadata_type: str, transformer: Transformer) -> None:
        self.transformers[metadata_type] = transformer

    def transform(self, metadata_type: Optional[str], content: str) -> str:
        transformer = self.transformers.get(metadata_type or "")
        if transformer is None:
            raise TransformError(f"No transformer for metadata type: {metadata_type}")
        return transformer(content)


default_transformer = MetadataTransformer()


class Metadata:
    """A metadata document referenced by a record.

    The body is either given up front or fetched once through ``loader``,
    which receives the reference endpoint.
    """

    def __init__(
        self,
        reference: Reference,
        *,
        body: str | None = None,
        loader: Callable[[str], str] | None = None,
        transformer: MetadataTransformer | None = None,
    ):
        self.reference = reference
        self._body = body
        self._loader = loader
        self._transformer = transformer or default_transformer

    @property
    def type(self) -> Optional[str]:
        return self.reference.type

    def to_xml(self) -> str:
        if self._body is None:
            if self._loader is None:
                raise MetadataUnavailable(
                    f"No metadata content available for {self.reference.endpoint}"
                )
            self._body = self._loader(self.reference.endpoint)
        return self._body

    def transform(self) -> str:
        return self._transformer.transform(self.type, self.to_xml())


__all__ = [
    "EmptyMetadataError",
    "Metadata",
    "MetadataTransformer",
    "MetadataUnavailable",
    "TransformError",
    "default_transformer",
    "transform_html",
    "transform_xml_summary",
]
