"""Text normalization helpers."""

from __future__ import annotations

import re
import unicodedata
from typing import Any

_NON_PARAM = re.compile(r"[^a-z0-9\-_]+", re.IGNORECASE)


def parameterize(value: Any, separator: str = "-") -> str:
    """Turn a label into a URL/key-safe token (``"Paper Map"`` -> ``"paper-map"``)."""

    text = unicodedata.normalize("NFKD", str(value))
    text = text.encode("ascii", "ignore").decode("ascii")
    text = _NON_PARAM.sub(separator, text)
    if separator:
        sep = re.escape(separator)
        text = re.sub(f"{sep}{{2,}}", separator, text)
        text = re.sub(f"^{sep}|{sep}$", "", text)
    return text.lower()


def camelize(value: str) -> str:
    """``"tiled_map_layer"`` -> ``"TiledMapLayer"``; path segments join with ``::``."""

    segments = []
    for segment in str(value).split("/"):
        segments.append("".join(part[:1].upper() + part[1:] for part in segment.split("_")))
    return "::".join(segments)


def truncate(text: str, length: int = 150, omission: str = "...") -> str:
    """Cap text at ``length`` characters, omission included."""

    if len(text) <= length:
        return text
    stop = max(length - len(omission), 0)
    return text[:stop] + omission


def flatten(value: Any) -> list[Any]:
    """Wrap scalars in a list and flatten nested lists/tuples."""

    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        return [value]
    flat: list[Any] = []
    for item in value:
        flat.extend(flatten(item))
    return flat


def join_values(value: Any) -> str:
    return " ".join(str(item) for item in flatten(value))


def is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


__all__ = [
    "camelize",
    "flatten",
    "is_blank",
    "join_values",
    "parameterize",
    "truncate",
]
