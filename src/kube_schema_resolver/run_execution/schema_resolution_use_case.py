"""Schema resolution use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable

from kube_schema_resolver.configuration import (
    Configuration,
    ConfigurationError,
    DiscoverySettings,
    load_configuration,
)
from kube_schema_resolver.definitions_resolution import (
    DefinitionExtensionNamer,
    DefinitionNamer,
    DefinitionsSchemaResolver,
    SchemeDefinitionNamer,
    load_definition_table,
)
from kube_schema_resolver.discovery_resolution import (
    ClientDiscoveryResolver,
    HttpOpenAPIV3Discovery,
    OpenAPIV3Discovery,
)
from kube_schema_resolver.results_writing import render_schema, write_schema
from kube_schema_resolver.schema_management import (
    SchemaResolutionError,
    SchemaResolver,
    UnresolvedReferenceError,
    unresolved_references,
)

from .run_contracts import RunOutcome, RunRequest

LOGGER = logging.getLogger(__name__)

DiscoveryFactory = Callable[[DiscoverySettings], OpenAPIV3Discovery]


class RunExecutionError(Exception):
    """Raised when a resolution run cannot be completed."""


def execute_schema_resolution(
    request: RunRequest,
    *,
    discovery_factory: DiscoveryFactory | None = None,
) -> RunOutcome:
    """Resolve one GVK as configured and render (and optionally write) the result."""
    try:
        configuration = load_configuration(request.config_path)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc

    gvk = request.gvk
    try:
        resolver = build_schema_resolver(configuration, discovery_factory=discovery_factory)
        try:
            schema = resolver.resolve_schema(gvk)
        finally:
            if isinstance(resolver, ClientDiscoveryResolver):
                resolver.close()
        dangling = unresolved_references(schema)
        if dangling:
            raise UnresolvedReferenceError(dangling[0])
    except SchemaResolutionError as exc:
        raise RunExecutionError(str(exc)) from exc
    LOGGER.debug("Resolved %s", gvk)

    try:
        rendered = render_schema(schema, request.output_format)
        output_path = (
            write_schema(rendered, request.output_path) if request.output_path else None
        )
    except (OSError, ValueError) as exc:
        raise RunExecutionError(str(exc)) from exc

    return RunOutcome(gvk=gvk, schema=schema, rendered=rendered, output_path=output_path)


def build_schema_resolver(
    configuration: Configuration,
    *,
    discovery_factory: DiscoveryFactory | None = None,
) -> SchemaResolver:
    """Build the resolver for whichever schema source the configuration names."""
    if configuration.discovery is not None:
        factory = discovery_factory or HttpOpenAPIV3Discovery
        LOGGER.debug("Using discovery at %s", configuration.discovery.base_url)
        return ClientDiscoveryResolver(factory(configuration.discovery))

    if configuration.definitions is None:
        raise RunExecutionError("Configuration does not name a schema source.")
    definitions = load_definition_table(configuration.definitions.path)
    namer: DefinitionNamer
    if configuration.definitions.scheme is not None:
        namer = SchemeDefinitionNamer(configuration.definitions.scheme)
    else:
        namer = DefinitionExtensionNamer(definitions)
    LOGGER.debug("Using definition table %s", configuration.definitions.path)
    return DefinitionsSchemaResolver(definitions, namer)
