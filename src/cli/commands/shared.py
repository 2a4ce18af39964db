"""Shared helpers for CLI subcommands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer


def emit_json(data: Any) -> None:
    typer.echo(json_dumps(data))


def json_dumps(payload: object) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2, default=str)


def load_record(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise typer.BadParameter(f"Record not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON in {path}: {exc}") from exc
    # accept a bare record or a search response wrapper
    if isinstance(raw, dict) and isinstance(raw.get("response"), dict):
        raw = raw["response"].get("document", raw)
    if not isinstance(raw, dict):
        raise typer.BadParameter(f"Record must be a JSON object: {path}")
    return raw


__all__ = ["emit_json", "json_dumps", "load_record"]
