"""Render helper output for a single record."""

from __future__ import annotations

from pathlib import Path

import typer

from core.config import get_settings
from rendering.helpers import GeoblacklightHelper, ViewContext
from schemas.document import GeoDocument
from .shared import emit_json, load_record


def preview_record(
    record_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        metavar="RECORD",
        help="JSON file holding one indexed record",
    ),
    signed_in: bool = typer.Option(False, "--signed-in", help="Render as an authenticated user"),
    locale: str | None = typer.Option(None, "--locale", help="Locale for labels"),
    controller: str = typer.Option("catalog", "--controller", help="Controller name"),
    html: bool = typer.Option(False, "--html", help="Print only the viewer markup"),
) -> None:
    settings = get_settings()
    record = load_record(record_path)
    try:
        document = GeoDocument.from_record(record)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    helper = GeoblacklightHelper(
        ViewContext(
            document=document,
            user_signed_in=signed_in,
            locale=locale,
            controller_name=controller,
            settings=settings,
        )
    )
    viewer = helper.viewer_container()
    if html:
        typer.echo(str(viewer))
        return

    emit_json(
        {
            "id": document.id,
            "available": helper.document_available(),
            "downloadable": helper.document_downloadable(),
            "attribute_table": helper.show_attribute_table(),
            "viewer_protocol": document.viewer_protocol,
            "sidebar_map": helper.render_sidebar_map(document),
            "help_text": (
                str(helper.render_help_text_entry("viewer_protocol", document.viewer_protocol))
                if helper.show_help_text("viewer_protocol", document.viewer_protocol)
                else None
            ),
            "map_selector": helper.results_js_map_selector(controller),
            "viewer": str(viewer),
            "web_services": [
                str(helper.render_web_services(ref))
                for ref in document.references
                if ref.type is not None
            ],
        }
    )


__all__ = ["preview_record"]
