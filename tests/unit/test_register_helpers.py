"""Unit tests for exposing helpers to Jinja2 templates."""

from jinja2 import DictLoader, Environment, select_autoescape

from rendering.helpers import HELPER_NAMES, register_helpers


def test_register_helpers_installs_globals(make_helper, wms_document):
    helper = make_helper(wms_document)
    env = Environment(
        loader=DictLoader(
            {
                "show.html": (
                    "{% if document_available() %}{{ viewer_container() }}{% endif %}"
                    "|{{ h.geoblacklight_basemap() }}|{{ snippit({'value': ['a', 'b']}) }}"
                )
            }
        ),
        autoescape=select_autoescape(["html"]),
    )
    register_helpers(env, helper)

    assert all(name in env.globals for name in HELPER_NAMES)
    html = env.get_template("show.html").render()
    viewer, basemap, snippet = html.split("|")
    assert viewer.startswith('<div id="map"')
    assert basemap == "positron"
    assert snippet == "a b"
