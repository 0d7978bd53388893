"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from kube_schema_resolver.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from kube_schema_resolver.results_writing import OUTPUT_FORMATS
from kube_schema_resolver.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_schema_resolution,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="kube-schema-resolver")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Resolve Kubernetes resource schemas with every reference inlined."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML resolver configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML resolver configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="resolve")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON resolver configuration file",
)
@click.option(
    "--group",
    default="",
    show_default=True,
    help="API group; leave empty for the core group",
)
@click.option("--version", "version", required=True, help="API version, for example v1")
@click.option("--kind", required=True, help="Resource kind, for example Pod")
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional file to write the resolved schema to",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="json",
    show_default=True,
    help="Output format of the resolved schema",
)
def resolve(  # pylint: disable=too-many-arguments
    config_path: str,
    group: str,
    version: str,
    kind: str,
    output_path: str | None,
    output_format: str,
) -> None:
    """Resolve the schema of one group/version/kind with all references inlined."""
    try:
        outcome = execute_schema_resolution(
            RunRequest(
                config_path=config_path,
                group=group,
                version=version,
                kind=kind,
                output_path=output_path,
                output_format=output_format,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))
    else:
        click.echo(outcome.rendered, nl=False)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
