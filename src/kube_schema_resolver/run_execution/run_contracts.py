"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from kube_schema_resolver.schema_management.schema_models import GroupVersionKind, Schema


@dataclass(frozen=True)
class RunRequest:
    """Input contract for resolving one type."""

    config_path: str
    group: str
    version: str
    kind: str
    output_path: str | None = None
    output_format: str = "json"

    @property
    def gvk(self) -> GroupVersionKind:
        return GroupVersionKind(group=self.group, version=self.version, kind=self.kind)


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed resolution."""

    gvk: GroupVersionKind
    schema: Schema
    rendered: str
    output_path: Path | None
