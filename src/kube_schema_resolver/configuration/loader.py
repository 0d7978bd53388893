"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from kube_schema_resolver.schema_management.schema_models import GroupVersionKind

from .runtime_settings import Configuration, DefinitionsSettings, DiscoverySettings

_SOURCE_SECTIONS = ("discovery", "definitions")
_REQUIRED_PLACEHOLDER = "<REQUIRED>"
_OPTIONAL_PLACEHOLDER = "<OPTIONAL>"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    present = [key for key in _SOURCE_SECTIONS if parsed.get(key) is not None]
    if len(present) != 1:
        raise ConfigurationError(
            "Exactly one schema source (discovery or definitions) must be provided."
        )

    if present[0] == "discovery":
        discovery = _parse_discovery_section(parsed["discovery"], path.parent)
        return Configuration(path=path, discovery=discovery)
    definitions = _parse_definitions_section(parsed["definitions"], path.parent)
    return Configuration(path=path, definitions=definitions)


def _parse_discovery_section(value: Any, base_path: Path) -> DiscoverySettings:
    section = _require_mapping(value, "discovery")
    base_url = _require_non_empty_string(section.get("base_url"), "discovery.base_url")
    if not base_url.startswith(("http://", "https://")):
        raise ConfigurationError("discovery.base_url must be an http(s) URL.")

    token = _optional_string(section.get("bearer_token"), "discovery.bearer_token")
    token_path = _optional_string(section.get("bearer_token_path"), "discovery.bearer_token_path")
    if token and token_path:
        raise ConfigurationError(
            "discovery must not set both bearer_token and bearer_token_path."
        )
    if token_path:
        token = _read_token(_resolve_path(base_path, token_path))

    verify_tls = section.get("verify_tls", True)
    if not isinstance(verify_tls, bool):
        raise ConfigurationError("discovery.verify_tls must be a boolean.")

    ca_bundle = _optional_string(section.get("ca_bundle_path"), "discovery.ca_bundle_path")
    ca_bundle_path = None
    if ca_bundle:
        ca_bundle_path = _resolve_path(base_path, ca_bundle)
        if not ca_bundle_path.exists():
            raise ConfigurationError(f"CA bundle file not found: {ca_bundle_path}")

    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", 30), "discovery.timeout_seconds"
    )
    return DiscoverySettings(
        base_url=base_url.rstrip("/"),
        bearer_token=token,
        verify_tls=verify_tls,
        ca_bundle_path=ca_bundle_path,
        timeout_seconds=timeout_seconds,
    )


def _parse_definitions_section(value: Any, base_path: Path) -> DefinitionsSettings:
    section = _require_mapping(value, "definitions")
    raw_path = _require_non_empty_string(section.get("path"), "definitions.path")
    table_path = _resolve_path(base_path, raw_path)
    if not table_path.exists():
        raise ConfigurationError(f"Definition table file not found: {table_path}")

    scheme = section.get("scheme")
    if scheme is None:
        return DefinitionsSettings(path=table_path)
    return DefinitionsSettings(path=table_path, scheme=_parse_scheme(scheme))


def _parse_scheme(value: Any) -> dict[str, tuple[GroupVersionKind, ...]]:
    section = _require_mapping(value, "definitions.scheme")
    scheme: dict[str, tuple[GroupVersionKind, ...]] = {}
    for type_name, entries in section.items():
        label = f"definitions.scheme.{type_name}"
        if not isinstance(entries, list) or not entries:
            raise ConfigurationError(f"{label} must be a non-empty list.")
        gvks = []
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise ConfigurationError(f"{label} entries must be mappings.")
            gvks.append(
                GroupVersionKind(
                    group=_optional_string(entry.get("group"), f"{label}.group") or "",
                    version=_require_non_empty_string(entry.get("version"), f"{label}.version"),
                    kind=_require_non_empty_string(entry.get("kind"), f"{label}.kind"),
                )
            )
        scheme[str(type_name)] = tuple(gvks)
    return scheme


def _read_token(token_path: Path) -> str:
    if not token_path.exists():
        raise ConfigurationError(f"Bearer token file not found: {token_path}")
    token = token_path.read_text(encoding="utf-8").strip()
    if not token:
        raise ConfigurationError(f"Bearer token file is empty: {token_path}")
    return token


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    if stripped == _REQUIRED_PLACEHOLDER:
        raise ConfigurationError(
            f"{field_name} still holds the {_REQUIRED_PLACEHOLDER} placeholder."
        )
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if stripped == _OPTIONAL_PLACEHOLDER:
        return None
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
