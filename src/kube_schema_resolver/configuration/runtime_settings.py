"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from kube_schema_resolver.schema_management.schema_models import GroupVersionKind


@dataclass(frozen=True)
class DiscoverySettings:
    """API server connectivity used by the discovery transport."""

    base_url: str
    bearer_token: str | None = None
    verify_tls: bool = True
    ca_bundle_path: Path | None = None
    timeout_seconds: int = 30


@dataclass(frozen=True)
class DefinitionsSettings:
    """Location of the static definition table and its optional scheme."""

    path: Path
    scheme: Mapping[str, tuple[GroupVersionKind, ...]] | None = None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate; exactly one source is set."""

    path: Path
    discovery: DiscoverySettings | None = None
    definitions: DefinitionsSettings | None = None
