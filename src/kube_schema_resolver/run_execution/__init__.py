"""Run execution exports."""

from .run_contracts import RunOutcome, RunRequest
from .schema_resolution_use_case import (
    RunExecutionError,
    build_schema_resolver,
    execute_schema_resolution,
)

__all__ = [
    "RunExecutionError",
    "RunOutcome",
    "RunRequest",
    "build_schema_resolver",
    "execute_schema_resolution",
]
