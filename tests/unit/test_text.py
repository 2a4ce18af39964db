"""Unit tests for text helpers."""

from utils.text import camelize, flatten, is_blank, join_values, parameterize, truncate


def test_parameterize_defaults_to_dashes():
    assert parameterize("Polygon data") == "polygon-data"
    assert parameterize("  Café -- Map!! ") == "cafe-map"


def test_parameterize_with_underscore_separator():
    assert parameterize("Paper Map", separator="_") == "paper_map"
    assert parameterize("Shapefile", separator="_") == "shapefile"
    assert parameterize("File Geodatabase", separator="_") == "file_geodatabase"


def test_camelize():
    assert camelize("wms") == "Wms"
    assert camelize("tiled_map_layer") == "TiledMapLayer"
    assert camelize("iiif_manifest") == "IiifManifest"
    assert camelize("esri/feature_layer") == "Esri::FeatureLayer"


def test_truncate_caps_length_with_omission():
    text = "a" * 200
    result = truncate(text, length=150)
    assert len(result) == 150
    assert result.endswith("...")
    assert result[:147] == "a" * 147


def test_truncate_leaves_short_text():
    assert truncate("a" * 150, length=150) == "a" * 150
    assert truncate("short") == "short"


def test_flatten_and_join():
    assert flatten(None) == []
    assert flatten("x") == ["x"]
    assert flatten(["a", ["b", ("c",)]]) == ["a", "b", "c"]
    assert join_values(["one", ["two", "three"]]) == "one two three"
    assert join_values("single") == "single"


def test_is_blank():
    assert is_blank(None)
    assert is_blank("   ")
    assert is_blank([])
    assert not is_blank("x")
    assert not is_blank(0)
