"""Unit tests for metadata transforms."""

import pytest

from conftest import FGDC_URI, ISO_URI
from schemas.metadata import (
    EmptyMetadataError,
    Metadata,
    MetadataTransformer,
    MetadataUnavailable,
    TransformError,
)
from schemas.references import Reference

ISO_XML = """<?xml version="1.0"?>
<gmd:MD_Metadata xmlns:gmd="http://www.isotc211.org/2005/gmd">
  <gmd:title>Roads &amp; Rails</gmd:title>
  <gmd:abstract>Transport network</gmd:abstract>
  <gmd:empty></gmd:empty>
</gmd:MD_Metadata>
"""


def _iso(body=None, loader=None):
    ref = Reference(uri=ISO_URI, endpoint="https://example.edu/iso.xml")
    return Metadata(ref, body=body, loader=loader)


def test_xml_summary_lists_leaf_elements():
    html = _iso(ISO_XML).transform()
    assert html.startswith('<dl class="metadata-summary">')
    assert "<dt>title</dt><dd>Roads &amp; Rails</dd>" in html
    assert "<dt>abstract</dt><dd>Transport network</dd>" in html
    assert "empty" not in html


def test_invalid_xml_raises_transform_error():
    with pytest.raises(TransformError, match="Invalid metadata XML"):
        _iso("<not-closed>").transform()


def test_empty_metadata_raises_transform_error():
    with pytest.raises(EmptyMetadataError):
        _iso("   ").transform()
    assert issubclass(EmptyMetadataError, TransformError)


def test_unknown_type_has_no_transformer():
    metadata = Metadata(Reference(uri="urn:other", endpoint="x"), body="<a>b</a>")
    with pytest.raises(TransformError, match="No transformer"):
        metadata.transform()


def test_html_metadata_passes_through():
    ref = Reference(uri="http://www.w3.org/1999/xhtml", endpoint="https://example.edu/m.html")
    assert Metadata(ref, body="<p>hi</p>").transform() == "<p>hi</p>"


def test_missing_body_without_loader():
    with pytest.raises(MetadataUnavailable):
        _iso().to_xml()
    assert not issubclass(MetadataUnavailable, TransformError)


def test_loader_runs_once():
    calls = []

    def loader(url):
        calls.append(url)
        return ISO_XML

    metadata = _iso(loader=loader)
    metadata.to_xml()
    metadata.transform()
    assert calls == ["https://example.edu/iso.xml"]


def test_custom_transformer_registration():
    transformer = MetadataTransformer()
    transformer.register("fgdc", lambda content: "<p>custom</p>")
    ref = Reference(uri=FGDC_URI, endpoint="x")
    metadata = Metadata(ref, body="<x/>", transformer=transformer)
    assert metadata.type == "fgdc"
    assert metadata.transform() == "<p>custom</p>"


def test_xml_summary_skips_comments_and_accepts_encoding_declaration():
    body = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<metadata><!-- harvested --><idinfo><title>Parcels</title>"
        "<?render skip?></idinfo></metadata>"
    )
    html = _iso(body).transform()
    assert html == '<dl class="metadata-summary"><dt>title</dt><dd>Parcels</dd></dl>'


def test_mismatched_tags_raise_transform_error():
    with pytest.raises(TransformError):
        _iso("<metadata><title>x</metadata>").transform()
