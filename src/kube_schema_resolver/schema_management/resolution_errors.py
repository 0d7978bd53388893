"""Schema resolution error taxonomy."""

from __future__ import annotations


class SchemaResolutionError(Exception):
    """Base class for every schema resolution failure."""


class SchemaNotFoundError(SchemaResolutionError):
    """Raised when no schema is known for the requested type."""


class UnresolvedReferenceError(SchemaResolutionError):
    """Raised when a $ref points at a schema missing from its own document or table."""

    def __init__(self, reference: str) -> None:
        super().__init__(
            f"internal error: cannot resolve reference {reference!r}: schema not found"
        )
        self.reference = reference


class DiscoveryError(SchemaResolutionError):
    """Raised when the discovery transport fails to deliver a response."""


class SchemaDecodeError(SchemaResolutionError):
    """Raised for malformed JSON documents or schema objects."""


class SchemaCopyError(SchemaResolutionError):
    """Raised when a schema cannot be deep copied."""
