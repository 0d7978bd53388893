"""Group-version-kind extension reader."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .schema_models import GVK_EXTENSION, GroupVersionKind


def extensions_to_gvks(extensions: Mapping[str, Any]) -> list[GroupVersionKind]:
    """Return the GVKs declared by an extension set.

    A missing or malformed extension yields an empty list. One malformed entry
    discards the whole list rather than returning the well-formed remainder.
    """
    declared = extensions.get(GVK_EXTENSION)
    if not isinstance(declared, list):
        return []

    gvks: list[GroupVersionKind] = []
    for entry in declared:
        if not isinstance(entry, Mapping):
            return []
        group = entry.get("group")
        version = entry.get("version")
        kind = entry.get("kind")
        if not (isinstance(group, str) and isinstance(version, str) and isinstance(kind, str)):
            return []
        gvks.append(GroupVersionKind(group=group, version=version, kind=kind))
    return gvks


def gvks_to_extension(gvks: list[GroupVersionKind]) -> dict[str, Any]:
    """Build the extension set that declares ``gvks``."""
    return {
        GVK_EXTENSION: [
            {"group": gvk.group, "version": gvk.version, "kind": gvk.kind} for gvk in gvks
        ]
    }
