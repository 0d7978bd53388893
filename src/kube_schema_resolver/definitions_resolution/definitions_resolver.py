"""Definitions-backed schema resolver."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from kube_schema_resolver.schema_management.gvk_extensions import extensions_to_gvks
from kube_schema_resolver.schema_management.reference_inlining import populate_references
from kube_schema_resolver.schema_management.resolution_errors import (
    SchemaCopyError,
    SchemaDecodeError,
    SchemaNotFoundError,
)
from kube_schema_resolver.schema_management.schema_models import GroupVersionKind, Schema

from .definition_naming import DefinitionNamer

LOGGER = logging.getLogger(__name__)


class DefinitionsSchemaResolver:
    """Resolver for built-in types backed by a static definition table.

    The table and the GVK index are built once and never mutated; every
    resolution works on deep copies.
    """

    def __init__(self, definitions: Mapping[str, Schema], namer: DefinitionNamer) -> None:
        self._definitions = dict(definitions)
        self._gvk_to_schema: dict[GroupVersionKind, Schema] = {}
        for name, definition in self._definitions.items():
            _, extensions = namer.get_definition_name(name)
            for gvk in extensions_to_gvks(extensions):
                self._gvk_to_schema[gvk] = definition
        LOGGER.debug(
            "Indexed %d GVKs from %d definitions",
            len(self._gvk_to_schema),
            len(self._definitions),
        )

    def resolve_schema(self, gvk: GroupVersionKind) -> Schema:
        """Return an isolated, fully inlined copy of the schema registered for ``gvk``."""
        definition = self._gvk_to_schema.get(gvk)
        if definition is None:
            raise SchemaNotFoundError(f"cannot resolve {gvk}: schema not found")
        try:
            result = deep_copy_schema(definition)
        except SchemaCopyError as exc:
            raise SchemaCopyError(f"cannot deep copy schema for {gvk}: {exc}") from exc

        def lookup(reference: str) -> Schema | None:
            target = self._definitions.get(reference)
            if target is None:
                return None
            return deep_copy_schema(target)

        populate_references(lookup, result)
        return result


def deep_copy_schema(schema: Schema) -> Schema:
    """Copy a schema through a JSON round trip.

    The schema is expected to be shallow, with nested types expressed as
    references. A node that contains itself cannot be encoded and raises
    SchemaCopyError.
    """
    try:
        encoded = json.dumps(schema.to_json())
        return Schema.from_json(json.loads(encoded))
    except (TypeError, ValueError, RecursionError, SchemaDecodeError) as exc:
        raise SchemaCopyError(str(exc)) from exc
