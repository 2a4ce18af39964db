"""Unit tests for the core configuration module."""

import os
from unittest.mock import patch

from core.config import FieldSettings, Settings, get_settings


def test_settings_defaults():
    """Test that Settings initializes with expected defaults."""
    settings = Settings(_env_file=None)

    assert "wms" in settings.help_text["viewer_protocol"]
    assert "pmtiles" in settings.help_text["viewer_protocol"]
    assert settings.sidebar_static_map == ["iiif", "iiif_manifest"]
    assert settings.leaflet["LAYERS"]["DETECT_RETINA"] is True
    assert settings.use_geom_for_relations_icon is False
    assert settings.basemap_provider is None
    assert settings.default_locale == "en"
    assert settings.record_fields == FieldSettings()
    assert settings.record_fields.geom_type == "gbl_resourceType_sm"


def test_settings_with_env_vars(monkeypatch):
    """Test that Settings properly loads values from environment variables."""
    monkeypatch.setenv("USE_GEOM_FOR_RELATIONS_ICON", "true")
    monkeypatch.setenv("BASEMAP_PROVIDER", "darkMatter")
    monkeypatch.setenv("SIDEBAR_STATIC_MAP", '["iiif"]')
    monkeypatch.setenv("HELP_TEXT", '{"viewer_protocol": ["wms"]}')

    settings = Settings(_env_file=None)

    assert settings.use_geom_for_relations_icon is True
    assert settings.basemap_provider == "darkMatter"
    assert settings.sidebar_static_map == ["iiif"]
    assert settings.help_text == {"viewer_protocol": ["wms"]}


def test_nested_field_names_from_env(monkeypatch):
    monkeypatch.setenv("FIELDS__GEOM_TYPE", "layer_geom_type_s")

    settings = Settings(_env_file=None)

    assert settings.record_fields.geom_type == "layer_geom_type_s"
    assert settings.record_fields.id == "id"


def test_get_settings_singleton():
    """Test that get_settings returns the same instance each time."""
    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2
    assert isinstance(settings1, Settings)


def test_settings_extra_field_handling():
    """Test that settings ignores extra fields."""
    with patch.dict(os.environ, {"UNKNOWN_FIELD": "value"}):
        settings = Settings(_env_file=None)

    assert hasattr(settings, "help_text")
