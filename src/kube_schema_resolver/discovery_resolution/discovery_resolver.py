"""Discovery-backed schema resolver."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Protocol

from kube_schema_resolver.schema_management.gvk_extensions import extensions_to_gvks
from kube_schema_resolver.schema_management.reference_inlining import populate_references
from kube_schema_resolver.schema_management.resolution_errors import (
    SchemaDecodeError,
    SchemaNotFoundError,
)
from kube_schema_resolver.schema_management.schema_models import (
    CONTENT_TYPE_JSON,
    REFERENCE_PREFIX,
    GroupVersionKind,
    Schema,
    SchemaDocument,
)

LOGGER = logging.getLogger(__name__)


class GroupVersionSchemaSource(Protocol):
    """Handle for the OpenAPI document of one group/version."""

    def schema(self, content_type: str) -> bytes: ...


class OpenAPIV3Discovery(Protocol):
    """Protocol implemented by both real and fake discovery transports."""

    def paths(self) -> Mapping[str, GroupVersionSchemaSource]: ...

    def close(self) -> None: ...


class ClientDiscoveryResolver:
    """Resolver that fetches schemas from a live discovery endpoint on every call."""

    def __init__(self, discovery: OpenAPIV3Discovery) -> None:
        self._discovery = discovery

    def close(self) -> None:
        """Release the discovery transport."""
        self._discovery.close()

    def resolve_schema(self, gvk: GroupVersionKind) -> Schema:
        """Fetch the group/version document, select the ``gvk`` schema and inline it."""
        paths = self._discovery.paths()
        resource_path = resource_path_for(gvk)
        source = paths.get(resource_path)
        if source is None:
            raise SchemaNotFoundError(
                f"cannot resolve group version {gvk.group_version!r}: schema not found"
            )

        LOGGER.debug("Fetching OpenAPI document from %s", resource_path)
        document = decode_schema_document(source.schema(CONTENT_TYPE_JSON))
        schema = resolve_type(document, gvk)

        def lookup(reference: str) -> Schema | None:
            return document.components.get(reference.removeprefix(REFERENCE_PREFIX))

        populate_references(lookup, schema)
        return schema


def resource_path_for(gvk: GroupVersionKind) -> str:
    """Return the discovery path serving the OpenAPI document of ``gvk``'s group/version."""
    if not gvk.group:
        return f"api/{gvk.version}"
    return f"apis/{gvk.group}/{gvk.version}"


def decode_schema_document(payload: bytes) -> SchemaDocument:
    try:
        root = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SchemaDecodeError(f"Invalid OpenAPI document: {exc}") from exc
    document = SchemaDocument.from_json(root)
    LOGGER.debug("Decoded OpenAPI document with %d component schemas", len(document.components))
    return document


def resolve_type(document: SchemaDocument, gvk: GroupVersionKind) -> Schema:
    """Return the component schema declaring ``gvk`` in its GVK extension."""
    for name, schema in document.components.items():
        if gvk in extensions_to_gvks(schema.extensions):
            LOGGER.debug("Matched %s to component %s", gvk, name)
            return schema
    raise SchemaNotFoundError(f"cannot resolve group version kind {str(gvk)!r}: schema not found")
