# src/makego/cli/main.py

"""
Main CLI entry point for make-go using Click.

Everything that is not one of the long options below is handed verbatim
to `go test`, so single-dash Go flags such as `-run` or `-short` pass
straight through.
"""

import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click
import structlog
from rich.pretty import pretty_repr

from makego.cli.utils import logging_options, setup_logging_from_context
from makego.config import MakeGoConfig, load_config
from makego.exceptions import ConfigurationError, MakeGoError
from makego.formatting import FORMATTER_MAP, get_formatter
from makego.project import current_working_directory, find_project_root
from makego.telemetry import StructLogger
from makego.workflow import (
    CommandSequencer,
    build_commands,
    get_command_runner,
    resolve_test_args,
)

try:
    __version__ = version("makego")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")

USAGE_INFO = """
    This program runs the following go utilities in the module root
    (the nearest directory at or above the working directory holding go.mod):

    - go version
    - go mod tidy
    - go fmt ./...
    - go test {args}

    The go test command {args} default to
    '-coverprofile=/tmp/coverage.out -short -timeout=10s ./...'
    if no args are provided.
"""


def _version_from_context(ctx: click.Context) -> str:
    obj = ctx.find_root().obj or {}
    return obj.get("VERSION", __version__)


def _print_usage(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Prints usage and option defaults, then exits non-zero."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Usage of make-go (version: {_version_from_context(ctx)})\n{USAGE_INFO}", err=True)
    click.echo(ctx.get_help(), err=True)
    ctx.exit(1)


def _print_version(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"make-go, version {_version_from_context(ctx)}")
    ctx.exit(0)


def _run_workflow(
    config: MakeGoConfig,
    go_test_args: tuple[str, ...],
    formatter_name: str | None,
    dry_run: bool,
) -> None:
    """Locates the module root, runs the command sequence and prints the report."""
    runner = get_command_runner("dry-run" if dry_run else config.toolchain.runner)
    formatter = get_formatter(formatter_name or config.output.formatter)

    test_args = resolve_test_args(go_test_args, default=config.toolchain.default_test_args)
    root = find_project_root(
        current_working_directory(),
        marker=config.project.marker_file,
        max_hops=config.project.max_hops,
    )
    commands = build_commands(test_args, go_executable=config.toolchain.go_executable)

    sequencer = CommandSequencer(runner, sink=sys.stdout)
    captured = sequencer.run_sync(commands, root)

    click.echo(config.output.separator)
    click.echo(formatter.format(captured).strip())


@click.command(
    name="make-go",
    context_settings={
        "help_option_names": [],
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
@click.option(
    "--help",
    "-help",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_print_usage,
    help="Show usage and option defaults, then exit with status 1.",
)
@click.option(
    "--version",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_print_version,
    help="Show the version and exit.",
)
@click.option(
    "--config-path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
    default=None,
    envvar="MAKEGO_CONF",
    show_envvar=True,
    help="Optional TOML configuration file.",
)
@click.option(
    "--formatter",
    "formatter_name",
    type=click.Choice(sorted(FORMATTER_MAP), case_sensitive=False),
    default=None,
    help="Report formatter (overrides config file).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Print the commands without executing them.",
)
@click.option(
    "--show-config",
    is_flag=True,
    default=False,
    help="Display the resolved configuration and exit.",
)
@logging_options
@click.argument("go_test_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    go_test_args: tuple[str, ...],
    config_path: Path | None,
    formatter_name: str | None,
    dry_run: bool,
    show_config: bool,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    make-go: tidy, format and test the Go module containing the working directory.

    GO_TEST_ARGS are appended verbatim to `go test`.
    Configuration precedence: CLI options > Environment Variables > Config File > Defaults.
    """
    ctx.ensure_object(dict)
    ctx.obj["LOG_LEVEL"] = log_level
    ctx.obj["LOG_FILE"] = log_file
    ctx.obj["JSON_LOGS"] = json_logs if json_logs is not None else False

    setup_logging_from_context(ctx)

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        log.error("Failed to load or validate configuration", error=str(e))
        click.echo(f"Error: Configuration problem in '{config_path}':\n{e}", err=True)
        ctx.exit(1)

    if log_level is None:
        setup_logging_from_context(ctx, default_log_level=config.global_config.log_level)

    log.debug(
        "make-go invoked",
        version=_version_from_context(ctx),
        go_test_args=list(go_test_args),
        config_path=str(config_path) if config_path else None,
        dry_run=dry_run,
    )

    if show_config:
        click.echo(pretty_repr(config, expand_all=True))
        return

    try:
        _run_workflow(config, go_test_args, formatter_name, dry_run)
    except MakeGoError as e:
        log.error("make-go aborted", error=str(e), error_type=type(e).__name__)
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    except KeyboardInterrupt:
        log.warning("Interrupted by KeyboardInterrupt (CTRL-C).")
        ctx.exit(130)


def main(version: str = __version__) -> None:
    """Console-script entry point; `version` is supplied by the packaging metadata."""
    cli(obj={"VERSION": version}, prog_name="make-go")


if __name__ == "__main__":
    main()

# 🖥️⚙️
