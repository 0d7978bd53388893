"""Results writing exports."""

from .schema_writer import OUTPUT_FORMATS, render_schema, write_schema

__all__ = ["OUTPUT_FORMATS", "render_schema", "write_schema"]
