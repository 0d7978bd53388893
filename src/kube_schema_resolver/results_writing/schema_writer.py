"""Resolved schema rendering service."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from kube_schema_resolver.schema_management.schema_models import Schema

OUTPUT_FORMATS = ("json", "yaml")


def render_schema(schema: Schema, output_format: str = "json") -> str:
    """Render a schema as indented JSON or block-style YAML."""
    document = schema.to_json()
    if output_format == "json":
        return json.dumps(document, indent=2) + "\n"
    if output_format == "yaml":
        return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)
    raise ValueError(f"Unsupported output format: {output_format}")


def write_schema(rendered: str, output_path: Path | str) -> Path:
    """Write rendered schema text, creating parent directories as needed."""
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(rendered, encoding="utf-8")
    return destination.resolve()
