"""Definition table loading service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from kube_schema_resolver.schema_management.resolution_errors import SchemaDecodeError
from kube_schema_resolver.schema_management.schema_models import Schema

LOGGER = logging.getLogger(__name__)


def load_definition_table(table_path: Path | str) -> dict[str, Schema]:
    """Read a JSON or YAML definition table into decoded schemas.

    The file holds either a mapping of definition name to schema object or that
    mapping nested under a top-level ``definitions`` key.
    """
    path = Path(table_path)
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SchemaDecodeError(f"Cannot read definition table {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SchemaDecodeError(f"Invalid definition table {path}: {exc}") from exc

    if isinstance(parsed, Mapping) and isinstance(parsed.get("definitions"), Mapping):
        parsed = parsed["definitions"]
    if not isinstance(parsed, Mapping):
        raise SchemaDecodeError("Definition table root must be a mapping.")

    definitions = {str(name): Schema.from_json(node) for name, node in parsed.items()}
    LOGGER.debug("Loaded %d definitions from %s", len(definitions), path)
    return definitions
