"""Discovery-backed resolution exports."""

from .discovery_resolver import (
    ClientDiscoveryResolver,
    GroupVersionSchemaSource,
    OpenAPIV3Discovery,
    decode_schema_document,
    resolve_type,
    resource_path_for,
)
from .http_discovery_client import HttpGroupVersionSource, HttpOpenAPIV3Discovery

__all__ = [
    "ClientDiscoveryResolver",
    "GroupVersionSchemaSource",
    "HttpGroupVersionSource",
    "HttpOpenAPIV3Discovery",
    "OpenAPIV3Discovery",
    "decode_schema_document",
    "resolve_type",
    "resource_path_for",
]
