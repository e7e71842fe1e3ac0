"""
Command-line interface for mirroring CI logs.

Provides a sync command plus read-only commands for browsing what a
buildbot server has available.
"""

import json
import logging
import sys

import click
from click.core import ParameterSource

from cilog_common.exceptions import BuilderNotFound, FetchError
from cilog_datasources.buildbot import BuildbotDatasource, select_tail

from .config import get_api_base, get_output_dir, get_retries, get_tail
from .sync import download_logs

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def connect(api_base: str | None, retries: int | None = None) -> BuildbotDatasource:
    """Create a buildbot datasource, exiting with an error if it is unreachable."""
    try:
        return BuildbotDatasource(get_api_base(api_base), retries=get_retries(retries))
    except FetchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level",
)
def cli(log_level: str):
    """CI Logs - Mirror build logs from a buildbot server to local disk."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.command("sync")
@click.option(
    "--api-base",
    "api_bases",
    multiple=True,
    help="Buildbot API base URL; repeat for several servers (default: CI_LOGS_API_BASE env)",
)
@click.option("--output-dir", help="Output root directory (default: CI_LOGS_DIR env or ~/.ci/logs)")
@click.option(
    "--tail",
    type=click.IntRange(min=0),
    help="Most recent builds per builder (default: CI_LOGS_TAIL env or 100)",
)
@click.option(
    "--retries",
    type=click.IntRange(min=0),
    help="Extra attempts per failed request (default: CI_LOGS_RETRIES env or 3)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Narrate progress (raises the log level to INFO unless --log-level is given)",
)
@click.pass_context
def sync(
    ctx: click.Context,
    api_bases: tuple[str, ...],
    output_dir: str | None,
    tail: int | None,
    retries: int | None,
    verbose: bool,
):
    """Download logs of the most recent builds."""
    # An explicit --log-level wins over --verbose
    log_level_source = ctx.find_root().get_parameter_source("log_level")
    if verbose and log_level_source is ParameterSource.DEFAULT:
        root = logging.getLogger()
        if root.getEffectiveLevel() > logging.INFO:
            root.setLevel(logging.INFO)

    sources = [connect(api_base, retries) for api_base in api_bases or (None,)]

    try:
        result = download_logs(
            sources,
            output_dir=get_output_dir(output_dir),
            tail=get_tail(tail),
            verbose=verbose,
        )
    except (FetchError, BuilderNotFound) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(str(result))


@cli.command("builders")
@click.option("--api-base", help="Buildbot API base URL (default: CI_LOGS_API_BASE env)")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def builders(api_base: str | None, json_output: bool):
    """List the builders whose logs are mirrored."""
    source = connect(api_base)

    if json_output:
        click.echo(json.dumps(source.builders, indent=2))
        return

    if not source.builders:
        click.echo("No builders found.")
        return

    click.echo(f"{'ID':<8} {'Name':<40}")
    click.echo("-" * 48)
    for name, builder_id in sorted(source.builders.items(), key=lambda item: item[1]):
        click.echo(f"{builder_id:<8} {name:<40}")


@cli.command("builds")
@click.argument("builder")
@click.option("--api-base", help="Buildbot API base URL (default: CI_LOGS_API_BASE env)")
@click.option("--tail", type=click.IntRange(min=0), help="Only show the most recent N builds")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def builds(builder: str, api_base: str | None, tail: int | None, json_output: bool):
    """List the complete builds of BUILDER (a name or numeric ID)."""
    source = connect(api_base)

    try:
        build_ids = source.get_builder_builds_list(
            int(builder) if builder.isdigit() else builder
        )
    except (FetchError, BuilderNotFound) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if tail is not None:
        build_ids = select_tail(build_ids, tail)

    if json_output:
        click.echo(json.dumps(build_ids))
    else:
        for build_id in build_ids:
            click.echo(build_id)


@cli.command("steps")
@click.argument("build_id", type=int)
@click.option("--api-base", help="Buildbot API base URL (default: CI_LOGS_API_BASE env)")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def steps(build_id: int, api_base: str | None, json_output: bool):
    """List the complete steps of BUILD_ID."""
    source = connect(api_base)

    try:
        step_numbers = source.get_build_steps_list(build_id)
    except FetchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if json_output:
        click.echo(json.dumps(step_numbers))
    else:
        for number in step_numbers:
            click.echo(number)


def main():
    """Main entry point for the ci-logs CLI."""
    cli()


if __name__ == "__main__":
    main()
