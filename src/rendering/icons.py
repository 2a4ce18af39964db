"""SVG icon lookup for view helpers."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from markupsafe import Markup

from rendering.markup import tag_options

DEFAULT_ICON_DIR = Path(__file__).resolve().parent / "icons"

_ICON_NAME = re.compile(r"^[a-z0-9_\-]+$")


class IconNotFound(LookupError):
    """Raised when no SVG exists for the requested icon name."""


@lru_cache(maxsize=256)
def _read_svg(path: str) -> str:
    return Path(path).read_text(encoding="utf-8").strip()


class IconLibrary:
    """Inline SVG icons stored as ``<name>.svg`` files."""

    def __init__(self, icon_dir: Path | str | None = None):
        self.icon_dir = Path(icon_dir) if icon_dir else DEFAULT_ICON_DIR

    def path_for(self, name: str) -> Path:
        if not _ICON_NAME.match(name):
            raise IconNotFound(f"Invalid icon name: {name!r}")
        path = self.icon_dir / f"{name}.svg"
        if not path.exists():
            raise IconNotFound(f"Could not find icon: {name}")
        return path

    def svg(self, name: str) -> Markup:
        return Markup(_read_svg(str(self.path_for(name))))

    def render(
        self,
        name: str,
        *,
        classes: str | None = None,
        label: str | None = None,
        aria_hidden: bool = True,
    ) -> Markup:
        """Wrap the icon SVG in a span carrying the icon's CSS classes."""
        svg = self.svg(name)
        css = f"blacklight-icons blacklight-icon-{name}"
        if classes:
            css = f"{css} {classes}"
        attrs = {
            "class_": css,
            "aria-hidden": "true" if aria_hidden and not label else None,
            "aria-label": label,
            "role": "img" if label else None,
        }
        return Markup(f"<span{tag_options(attrs)}>{svg}</span>")


__all__ = ["DEFAULT_ICON_DIR", "IconLibrary", "IconNotFound"]
