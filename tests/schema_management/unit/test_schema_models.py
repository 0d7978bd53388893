"""Schema model tests."""

from __future__ import annotations

import pytest
from kube_schema_resolver.schema_management.resolution_errors import SchemaDecodeError
from kube_schema_resolver.schema_management.schema_models import (
    GroupVersionKind,
    Schema,
    SchemaDocument,
)


def test_gvk_equality_is_structural_and_hashable() -> None:
    index = {GroupVersionKind("apps", "v1", "Deployment"): "found"}

    assert index[GroupVersionKind("apps", "v1", "Deployment")] == "found"
    assert GroupVersionKind("apps", "v1", "Deployment") != GroupVersionKind("apps", "v1", "Pod")


def test_gvk_renders_core_and_named_groups() -> None:
    assert GroupVersionKind("", "v1", "Pod").group_version == "v1"
    assert str(GroupVersionKind("", "v1", "Pod")) == "v1, Kind=Pod"
    assert str(GroupVersionKind("apps", "v1", "Deployment")) == "apps/v1, Kind=Deployment"


def test_from_json_splits_walked_fields_extensions_and_keywords() -> None:
    node = {
        "type": "object",
        "description": "A pod.",
        "required": ["spec"],
        "properties": {"spec": {"$ref": "#/components/schemas/PodSpec"}},
        "additionalProperties": False,
        "x-kubernetes-group-version-kind": [{"group": "", "version": "v1", "kind": "Pod"}],
    }

    schema = Schema.from_json(node)

    assert schema.keywords == {"type": "object", "description": "A pod.", "required": ["spec"]}
    assert schema.properties["spec"].ref == "#/components/schemas/PodSpec"
    assert schema.additional_properties is False
    assert list(schema.extensions) == ["x-kubernetes-group-version-kind"]
    assert schema.to_json() == node


@pytest.mark.parametrize(
    "node",
    [
        [],
        {"$ref": 3},
        {"properties": []},
        {"allOf": {"$ref": "X"}},
        {"items": "string"},
    ],
)
def test_from_json_rejects_malformed_nodes(node: object) -> None:
    with pytest.raises(SchemaDecodeError):
        Schema.from_json(node)


def test_explicit_empty_properties_survive_encoding() -> None:
    schema = Schema.from_json({"type": "object", "properties": {}})

    assert schema.to_json() == {"type": "object", "properties": {}}
    assert Schema.from_json({"type": "object"}).to_json() == {"type": "object"}


def test_assign_replaces_every_field() -> None:
    target = Schema(ref="X", keywords={"description": "wrapper"})
    source = Schema(keywords={"type": "string"}, extensions={"x-a": 1})

    target.assign(source)

    assert target == source


def test_document_keeps_only_component_schemas() -> None:
    document = SchemaDocument.from_json(
        {
            "openapi": "3.0.0",
            "paths": {"/api/v1/pods": {}},
            "components": {"schemas": {"io.k8s.api.core.v1.Pod": {"type": "object"}}},
        }
    )

    assert list(document.components) == ["io.k8s.api.core.v1.Pod"]


def test_document_without_components_is_empty() -> None:
    assert SchemaDocument.from_json({"openapi": "3.0.0"}).components == {}


def test_document_root_must_be_an_object() -> None:
    with pytest.raises(SchemaDecodeError):
        SchemaDocument.from_json(["not", "a", "document"])
