"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from kube_schema_resolver.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_build_placeholder_configuration_contains_both_sources() -> None:
    scaffold = build_placeholder_configuration()

    assert "Configuration template" in scaffold
    assert "discovery:" in scaffold
    assert "# definitions:" in scaffold
    assert "scheme:" in scaffold
    assert "<REQUIRED>" in scaffold
    assert "<OPTIONAL>" in scaffold
    assert "# Keep exactly one schema source" in scaffold


def test_placeholder_configuration_is_valid_yaml_with_one_source() -> None:
    parsed = yaml.safe_load(build_placeholder_configuration())

    assert list(parsed) == ["discovery"]
    assert "bearer_token" not in parsed["discovery"]


def test_write_placeholder_configuration_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "resolver.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert output_path.exists()
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "resolver.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
