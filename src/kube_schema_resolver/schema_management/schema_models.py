"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from .resolution_errors import SchemaDecodeError

REFERENCE_PREFIX = "#/components/schemas/"
GVK_EXTENSION = "x-kubernetes-group-version-kind"
CONTENT_TYPE_JSON = "application/json"

_EXTENSION_PREFIX = "x-"


@dataclass(frozen=True)
class GroupVersionKind:
    """Group, version and kind identifying one resource type."""

    group: str
    version: str
    kind: str

    @property
    def group_version(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    def __str__(self) -> str:
        return f"{self.group_version}, Kind={self.kind}"


@dataclass
class Schema:
    """Structural type description with the fields reference inlining walks.

    Keywords the resolver does not interpret (``type``, ``description``,
    ``required``, ``oneOf`` and so on) are kept verbatim in ``keywords``.
    """

    ref: str = ""
    properties: dict[str, Schema] = field(default_factory=dict)
    additional_properties: Schema | bool | None = None
    items: Schema | list[Schema] | None = None
    all_of: list[Schema] = field(default_factory=list)
    extensions: dict[str, Any] = field(default_factory=dict)
    keywords: dict[str, Any] = field(default_factory=dict)
    declares_properties: bool = False

    @classmethod
    def from_json(cls, node: Any) -> Schema:
        """Decode one JSON schema object, recursing into the walked sub-schemas."""
        if not isinstance(node, Mapping):
            raise SchemaDecodeError("Schema nodes must be JSON objects.")

        schema = cls()
        for key, value in node.items():
            if key == "$ref":
                if not isinstance(value, str):
                    raise SchemaDecodeError("$ref must be a string.")
                schema.ref = value
            elif key == "properties":
                if not isinstance(value, Mapping):
                    raise SchemaDecodeError("properties must be an object.")
                schema.properties = {
                    name: cls.from_json(child) for name, child in value.items()
                }
                schema.declares_properties = True
            elif key == "additionalProperties":
                schema.additional_properties = (
                    value if isinstance(value, bool) else cls.from_json(value)
                )
            elif key == "items":
                if isinstance(value, list):
                    schema.items = [cls.from_json(child) for child in value]
                else:
                    schema.items = cls.from_json(value)
            elif key == "allOf":
                if not isinstance(value, list):
                    raise SchemaDecodeError("allOf must be an array.")
                schema.all_of = [cls.from_json(child) for child in value]
            elif isinstance(key, str) and key.startswith(_EXTENSION_PREFIX):
                schema.extensions[key] = value
            else:
                schema.keywords[key] = value
        return schema

    def to_json(self) -> dict[str, Any]:
        """Encode the schema back into plain JSON values."""
        encoded: dict[str, Any] = dict(self.keywords)
        if self.ref:
            encoded["$ref"] = self.ref
        if self.properties or self.declares_properties:
            encoded["properties"] = {
                name: child.to_json() for name, child in self.properties.items()
            }
        if isinstance(self.additional_properties, Schema):
            encoded["additionalProperties"] = self.additional_properties.to_json()
        elif self.additional_properties is not None:
            encoded["additionalProperties"] = self.additional_properties
        if isinstance(self.items, Schema):
            encoded["items"] = self.items.to_json()
        elif self.items is not None:
            encoded["items"] = [child.to_json() for child in self.items]
        if self.all_of:
            encoded["allOf"] = [child.to_json() for child in self.all_of]
        encoded.update(self.extensions)
        return encoded

    def assign(self, other: Schema) -> None:
        """Replace every field of this node with the fields of ``other`` (shallow)."""
        for schema_field in fields(self):
            setattr(self, schema_field.name, getattr(other, schema_field.name))


@dataclass(frozen=True)
class SchemaDocument:
    """Decoded OpenAPI v3 document, reduced to its component schemas."""

    components: dict[str, Schema]

    @classmethod
    def from_json(cls, root: Any) -> SchemaDocument:
        if not isinstance(root, Mapping):
            raise SchemaDecodeError("OpenAPI document root must be an object.")
        components = root.get("components") or {}
        if not isinstance(components, Mapping):
            raise SchemaDecodeError("components must be an object.")
        schemas = components.get("schemas") or {}
        if not isinstance(schemas, Mapping):
            raise SchemaDecodeError("components.schemas must be an object.")
        return cls(components={name: Schema.from_json(node) for name, node in schemas.items()})
