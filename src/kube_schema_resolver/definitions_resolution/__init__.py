"""Definitions-backed resolution exports."""

from .definition_naming import (
    DefinitionExtensionNamer,
    DefinitionNamer,
    SchemeDefinitionNamer,
    friendly_name,
)
from .definition_table import load_definition_table
from .definitions_resolver import DefinitionsSchemaResolver, deep_copy_schema

__all__ = [
    "DefinitionExtensionNamer",
    "DefinitionNamer",
    "DefinitionsSchemaResolver",
    "SchemeDefinitionNamer",
    "deep_copy_schema",
    "friendly_name",
    "load_definition_table",
]
