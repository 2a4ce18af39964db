"""Partial lookup over a Jinja2 template tree."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


def partial_path(partial: str, prefix: str = "catalog", ext: str = ".html.j2") -> str:
    """Map a partial name to its template file.

    ``"web_services_wms"`` becomes ``"catalog/_web_services_wms.html.j2"`` and
    ``"catalog/metadata/content"`` becomes ``"catalog/metadata/_content.html.j2"``.
    """
    directory, _, name = partial.rpartition("/")
    if not directory:
        directory = prefix
    return f"{directory}/_{name}{ext}"


class PartialRenderer:
    """Renders named partials; a missing one raises ``jinja2.TemplateNotFound``."""

    def __init__(
        self,
        template_dir: Path | str | None = None,
        *,
        prefix: str = "catalog",
        env: Environment | None = None,
    ):
        self.template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
        self.prefix = prefix
        self.env = env or self._build_env()

    def _build_env(self) -> Environment:
        return Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml", "j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, partial: str, **locals: Any) -> Markup:
        template = self.env.get_template(partial_path(partial, self.prefix))
        return Markup(template.render(**locals))


__all__ = ["DEFAULT_TEMPLATE_DIR", "PartialRenderer", "partial_path"]
