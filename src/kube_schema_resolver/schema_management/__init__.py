"""Schema management exports."""

from .gvk_extensions import extensions_to_gvks, gvks_to_extension
from .reference_inlining import populate_references, reference_of, unresolved_references
from .resolution_errors import (
    DiscoveryError,
    SchemaCopyError,
    SchemaDecodeError,
    SchemaNotFoundError,
    SchemaResolutionError,
    UnresolvedReferenceError,
)
from .resolver_contracts import SchemaResolver
from .schema_models import (
    CONTENT_TYPE_JSON,
    GVK_EXTENSION,
    REFERENCE_PREFIX,
    GroupVersionKind,
    Schema,
    SchemaDocument,
)

__all__ = [
    "CONTENT_TYPE_JSON",
    "GVK_EXTENSION",
    "REFERENCE_PREFIX",
    "DiscoveryError",
    "GroupVersionKind",
    "Schema",
    "SchemaCopyError",
    "SchemaDecodeError",
    "SchemaDocument",
    "SchemaNotFoundError",
    "SchemaResolutionError",
    "SchemaResolver",
    "UnresolvedReferenceError",
    "extensions_to_gvks",
    "gvks_to_extension",
    "populate_references",
    "reference_of",
    "unresolved_references",
]
