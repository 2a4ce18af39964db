"""Unit tests for locale catalogs."""

import pytest

from rendering.i18n import MissingTranslation, Translator, load_catalog


def test_lookup_and_interpolation():
    translator = Translator()
    assert translator.translate("geoblacklight.formats.shapefile") == "Shapefile"
    assert (
        translator.translate("geoblacklight.download.download_link", download_format="JPG")
        == "Original JPG"
    )


def test_mapping_entries_are_returned_whole():
    entry = Translator().translate("geoblacklight.help_text.viewer_protocol.wms")
    assert entry["title"] == "Web Map Service (WMS)"
    assert "content" in entry


def test_exists():
    translator = Translator()
    assert translator.exists("geoblacklight.references.wms")
    assert not translator.exists("geoblacklight.references.nope")
    assert not translator.exists("geoblacklight.references.wms.deeper")
    assert not translator.exists("geoblacklight.references.wms", locale="xx")


def test_missing_translation_message():
    with pytest.raises(MissingTranslation) as excinfo:
        Translator().translate("geoblacklight.formats.unknown")
    assert str(excinfo.value) == "translation missing: en.geoblacklight.formats.unknown"


def test_missing_interpolation_argument():
    with pytest.raises(ValueError, match="download_format"):
        Translator().translate("geoblacklight.download.download_link")


def test_custom_locale_dir(tmp_path):
    (tmp_path / "fr.yml").write_text(
        "fr:\n  geoblacklight:\n    formats:\n      shapefile: Fichier de formes\n",
        encoding="utf-8",
    )
    translator = Translator(tmp_path, default_locale="fr")
    assert translator.translate("geoblacklight.formats.shapefile") == "Fichier de formes"


def test_load_catalog_validation(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "en.yml")

    bad_root = tmp_path / "de.yml"
    bad_root.write_text("en:\n  a: b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="rooted at 'de'"):
        load_catalog(bad_root)

    not_mapping = tmp_path / "es.yml"
    not_mapping.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="YAML mapping"):
        load_catalog(not_mapping)
