"""Escaped HTML tag builders."""

from __future__ import annotations

import json
from typing import Any

from markupsafe import Markup, escape


def _attr_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def tag_options(attrs: dict[str, Any]) -> Markup:
    """Serialize attributes; ``data={...}`` expands into dasherized ``data-*`` pairs."""
    parts: list[str] = []
    for key, value in attrs.items():
        if key == "data" and isinstance(value, dict):
            for data_key, data_value in value.items():
                if data_value is None:
                    continue
                name = "data-" + str(data_key).replace("_", "-")
                parts.append(f' {name}="{escape(_attr_value(data_value))}"')
            continue
        if value is None or value is False:
            continue
        name = "class" if key == "class_" else key
        if value is True:
            parts.append(f' {name}="{name}"')
        elif isinstance(value, (list, tuple)):
            parts.append(f' {name}="{escape(" ".join(str(item) for item in value))}"')
        else:
            parts.append(f' {name}="{escape(value)}"')
    return Markup("".join(parts))


def content_tag(name: str, content: Any = None, **attrs: Any) -> Markup:
    body = "" if content is None else escape(content)
    return Markup(f"<{name}{tag_options(attrs)}>{body}</{name}>")


def link_to(text: Any, url: str, **attrs: Any) -> Markup:
    return content_tag("a", text, href=url, **attrs)


__all__ = ["content_tag", "link_to", "tag_options"]
