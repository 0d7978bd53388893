"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from kube_schema_resolver.cli import cli


def _write_definitions_config(tmp_path: Path) -> Path:
    definitions = {
        "k8s.io/api/apps/v1.Deployment": {
            "type": "object",
            "properties": {
                "metadata": {
                    "description": "Standard object metadata.",
                    "allOf": [{"$ref": "k8s.io/apimachinery/pkg/apis/meta/v1.ObjectMeta"}],
                },
                "spec": {"$ref": "k8s.io/api/apps/v1.DeploymentSpec"},
            },
        },
        "k8s.io/api/apps/v1.DeploymentSpec": {
            "type": "object",
            "properties": {
                "replicas": {"type": "integer", "format": "int32"},
                "template": {"$ref": "k8s.io/api/core/v1.PodTemplateSpec"},
            },
        },
        "k8s.io/api/core/v1.PodTemplateSpec": {
            "type": "object",
            "properties": {
                "labels": {"type": "object", "additionalProperties": {"type": "string"}},
            },
        },
        "k8s.io/apimachinery/pkg/apis/meta/v1.ObjectMeta": {
            "type": "object",
            "properties": {"name": {"type": "string"}},
        },
    }
    (tmp_path / "definitions.json").write_text(json.dumps(definitions), encoding="utf-8")
    config = {
        "definitions": {
            "path": "definitions.json",
            "scheme": {
                "k8s.io/api/apps/v1.Deployment": [
                    {"group": "apps", "version": "v1", "kind": "Deployment"}
                ]
            },
        }
    }
    config_path = tmp_path / "resolver.yaml"
    config_path.write_text(yaml.safe_dump(config), encoding="utf-8")
    return config_path


def test_resolve_command_prints_inlined_json(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_definitions_config(tmp_path)

    result = runner.invoke(
        cli,
        [
            "resolve",
            "--config",
            str(config_path),
            "--group",
            "apps",
            "--version",
            "v1",
            "--kind",
            "Deployment",
        ],
    )

    assert result.exit_code == 0, result.output
    resolved = json.loads(result.output)
    assert resolved["properties"]["metadata"] == {
        "type": "object",
        "properties": {"name": {"type": "string"}},
    }
    template = resolved["properties"]["spec"]["properties"]["template"]
    assert template["properties"]["labels"]["additionalProperties"] == {"type": "string"}
    assert "$ref" not in result.output


def test_resolve_command_writes_yaml_file(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_definitions_config(tmp_path)
    output_path = tmp_path / "deployment.yaml"

    result = runner.invoke(
        cli,
        [
            "--verbose",
            "resolve",
            "--config",
            str(config_path),
            "--group",
            "apps",
            "--version",
            "v1",
            "--kind",
            "Deployment",
            "--format",
            "yaml",
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert str(output_path.resolve()) in result.output
    written = yaml.safe_load(output_path.read_text(encoding="utf-8"))
    assert written["properties"]["spec"]["properties"]["replicas"]["format"] == "int32"


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "resolver.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()
    assert "discovery:" in output_path.read_text(encoding="utf-8")
