"""Reference inlining service."""

from __future__ import annotations

from collections.abc import Callable

from .resolution_errors import UnresolvedReferenceError
from .schema_models import Schema

SchemaLookup = Callable[[str], Schema | None]


def populate_references(lookup: SchemaLookup, schema: Schema) -> None:
    """Replace every reference reachable from ``schema`` with its target, in place.

    Properties, additionalProperties, items (single or tuple form) and allOf members
    are inlined recursively, the same fields unresolved_references walks. A referencing
    node is overwritten wholesale by the target, so sibling fields such as a wrapping
    description are dropped. On failure the tree may already be partially inlined.

    Reference graphs must be acyclic; a cycle recurses until the interpreter
    recursion limit is reached.

    Raises:
      UnresolvedReferenceError: If ``lookup`` does not know a referenced schema.
    """
    reference = reference_of(schema)
    if reference is not None:
        resolved = lookup(reference)
        if resolved is None:
            raise UnresolvedReferenceError(reference)
        schema.assign(resolved)
        # The target may itself be a reference.
        populate_references(lookup, schema)
        return

    for prop in schema.properties.values():
        populate_references(lookup, prop)
    if isinstance(schema.additional_properties, Schema):
        populate_references(lookup, schema.additional_properties)
    if isinstance(schema.items, Schema):
        populate_references(lookup, schema.items)
    elif isinstance(schema.items, list):
        for item in schema.items:
            populate_references(lookup, item)
    for member in schema.all_of:
        populate_references(lookup, member)


def reference_of(schema: Schema) -> str | None:
    """Return the reference a node stands for, or None when it is not a reference."""
    if schema.ref:
        return schema.ref
    # allOf only wraps a single $ref so that a description can sit next to it.
    for member in schema.all_of:
        reference = reference_of(member)
        if reference is not None:
            return reference
    return None


def unresolved_references(schema: Schema) -> list[str]:
    """List every reference still present in the walked parts of a schema tree."""
    found: list[str] = []
    _collect_references(schema, found)
    return found


def _collect_references(schema: Schema, found: list[str]) -> None:
    if schema.ref:
        found.append(schema.ref)
    children: list[Schema] = [*schema.properties.values(), *schema.all_of]
    if isinstance(schema.additional_properties, Schema):
        children.append(schema.additional_properties)
    if isinstance(schema.items, Schema):
        children.append(schema.items)
    elif isinstance(schema.items, list):
        children.extend(schema.items)
    for child in children:
        _collect_references(child, found)
