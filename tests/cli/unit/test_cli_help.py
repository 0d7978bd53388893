"""CLI smoke tests."""

from click.testing import CliRunner
from kube_schema_resolver.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "resolve" in result.output


def test_resolve_help_lists_gvk_options() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["resolve", "--help"])

    assert result.exit_code == 0
    for option in ("--config", "--group", "--version", "--kind", "--format"):
        assert option in result.output
