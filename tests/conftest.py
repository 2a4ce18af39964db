# tests/conftest.py
import json

import pytest

from core.config import Settings
from rendering.helpers import GeoblacklightHelper, ViewContext
from schemas.document import GeoDocument

WMS_URI = "http://www.opengis.net/def/serviceType/ogc/wms"
WFS_URI = "http://www.opengis.net/def/serviceType/ogc/wfs"
URL_URI = "http://schema.org/url"
ISO_URI = "http://www.isotc211.org/schemas/2005/gmd/"
FGDC_URI = "http://www.opengis.net/cat/csw/csdgm"
IIIF_URI = "http://iiif.io/api/image"
PMTILES_URI = "https://github.com/protomaps/PMTiles"
COG_URI = "https://github.com/cogeotiff/cog-spec"
DOWNLOAD_URI = "http://schema.org/downloadUrl"


def make_record(**overrides):
    record = {
        "id": "stanford-cz128vq0535",
        "dct_title_s": "2005 Rural Poverty GIS Database: Chile",
        "dct_accessRights_s": "Public",
        "schema_provider_s": "Stanford",
        "gbl_wxsIdentifier_s": "druid:cz128vq0535",
        "locn_geometry": "ENVELOPE(-109.4, -66.4, -17.5, -55.9)",
        "gbl_resourceType_sm": ["Polygon data"],
        "dct_references_s": json.dumps(
            {
                WMS_URI: "https://geowebservices.stanford.edu/geoserver/wms",
                WFS_URI: "https://geowebservices.stanford.edu/geoserver/wfs",
                URL_URI: "https://purl.stanford.edu/cz128vq0535",
                ISO_URI: "https://purl.stanford.edu/cz128vq0535.iso19139",
            }
        ),
    }
    record.update(overrides)
    return record


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def make_document():
    def _make(**overrides) -> GeoDocument:
        return GeoDocument.from_record(make_record(**overrides), institution="Stanford")

    return _make


@pytest.fixture
def wms_document(make_document) -> GeoDocument:
    return make_document()


@pytest.fixture
def make_helper(settings):
    def _make(document=None, **context) -> GeoblacklightHelper:
        context.setdefault("settings", settings)
        return GeoblacklightHelper(ViewContext(document=document, **context))

    return _make
