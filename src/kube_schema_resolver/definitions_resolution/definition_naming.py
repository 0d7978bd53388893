"""Definition naming schemes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from kube_schema_resolver.schema_management.gvk_extensions import gvks_to_extension
from kube_schema_resolver.schema_management.schema_models import GroupVersionKind, Schema


class DefinitionNamer(Protocol):
    """Maps a generated type name to its published name and extension set."""

    def get_definition_name(self, name: str) -> tuple[str, Mapping[str, Any]]: ...


def friendly_name(name: str) -> str:
    """Return the dotted published name of a Go-style type path.

    >>> friendly_name("k8s.io/api/core/v1.Pod")
    'io.k8s.api.core.v1.Pod'
    """
    segments = name.split("/")
    if "." in segments[0]:
        segments[0] = ".".join(reversed(segments[0].split(".")))
    return ".".join(segments)


class SchemeDefinitionNamer:
    """Naming scheme backed by a registry of type name to the GVKs it serves."""

    def __init__(self, kinds_by_type: Mapping[str, Sequence[GroupVersionKind]]) -> None:
        self._kinds_by_type = {name: list(gvks) for name, gvks in kinds_by_type.items()}

    def get_definition_name(self, name: str) -> tuple[str, Mapping[str, Any]]:
        gvks = self._kinds_by_type.get(name)
        if not gvks:
            return friendly_name(name), {}
        return friendly_name(name), gvks_to_extension(gvks)


class DefinitionExtensionNamer:
    """Naming scheme reading the extensions each definition already carries."""

    def __init__(self, definitions: Mapping[str, Schema]) -> None:
        self._definitions = definitions

    def get_definition_name(self, name: str) -> tuple[str, Mapping[str, Any]]:
        definition = self._definitions.get(name)
        if definition is None:
            return friendly_name(name), {}
        return friendly_name(name), definition.extensions
