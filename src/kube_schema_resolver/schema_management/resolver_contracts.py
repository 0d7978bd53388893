"""Schema resolver contract."""

from __future__ import annotations

from typing import Protocol

from .schema_models import GroupVersionKind, Schema


class SchemaResolver(Protocol):
    """Protocol implemented by the discovery-backed and definitions-backed resolvers."""

    def resolve_schema(self, gvk: GroupVersionKind) -> Schema:
        """Return the fully inlined schema for ``gvk``.

        Raises:
          SchemaNotFoundError: If no schema is known for ``gvk``.
          SchemaResolutionError: For transport, decode, copy or dangling reference failures.
        """
        ...
