"""Locale catalogs for view labels, loaded from YAML."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_LOCALE_DIR = Path(__file__).resolve().parent / "locales"

_INTERPOLATION = re.compile(r"%\{(\w+)\}")


class MissingTranslation(KeyError):
    """Raised when a dotted key has no entry in the locale catalog."""

    def __init__(self, key: str, locale: str):
        super().__init__(f"{locale}.{key}")
        self.key = key
        self.locale = locale

    def __str__(self) -> str:
        return f"translation missing: {self.locale}.{self.key}"


def load_catalog(path: Path | str) -> dict[str, Any]:
    """Load and validate one locale catalog rooted at its locale name."""
    resolved = Path(path)
    if not resolved.exists():
        raise FileNotFoundError(f"Locale catalog not found: {resolved}")

    raw = yaml.safe_load(resolved.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Locale catalog must be a YAML mapping: {resolved}")

    locale = resolved.stem
    body = raw.get(locale)
    if not isinstance(body, dict):
        raise ValueError(f"Locale catalog {resolved} must be rooted at '{locale}'")
    return body


@lru_cache(maxsize=16)
def _cached_catalog(path: str) -> dict[str, Any]:
    return load_catalog(path)


def interpolate(text: str, values: dict[str, Any]) -> str:
    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in values:
            raise ValueError(f"Missing interpolation argument '{name}' in {text!r}")
        return str(values[name])

    return _INTERPOLATION.sub(_replace, text)


class Translator:
    """Dotted-key lookup over ``<locale>.yml`` catalogs."""

    def __init__(self, locale_dir: Path | str | None = None, default_locale: str = "en"):
        self.locale_dir = Path(locale_dir) if locale_dir else DEFAULT_LOCALE_DIR
        self.default_locale = default_locale

    def catalog(self, locale: str | None = None) -> dict[str, Any]:
        locale = locale or self.default_locale
        path = self.locale_dir / f"{locale}.yml"
        if not path.exists():
            return {}
        return _cached_catalog(str(path))

    def lookup(self, key: str, locale: str | None = None) -> Any:
        locale = locale or self.default_locale
        node: Any = self.catalog(locale)
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                raise MissingTranslation(key, locale)
            node = node[part]
        if node is None:
            raise MissingTranslation(key, locale)
        return node

    def exists(self, key: str, locale: str | None = None) -> bool:
        try:
            self.lookup(key, locale)
        except MissingTranslation:
            return False
        return True

    def translate(self, key: str, locale: str | None = None, **values: Any) -> Any:
        """Return the entry for ``key``; string entries get ``%{name}`` interpolation."""
        value = self.lookup(key, locale)
        if isinstance(value, str):
            return interpolate(value, values)
        return value

    t = translate


__all__ = ["DEFAULT_LOCALE_DIR", "MissingTranslation", "Translator", "load_catalog"]
