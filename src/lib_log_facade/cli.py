"""Click command group exposing metadata and a logging demo.

Purpose
-------
Offer ``lib_log_facade`` / ``python -m lib_log_facade`` for smoke tests and for
previewing how each destination renders messages.

Contents
--------
* :func:`cli` - root group handling ``--version`` and ``.env`` loading.
* :func:`info_command` - prints the metadata banner.
* :func:`demo_command` - emits one message per level through a destination.
* :func:`main` - test-friendly wrapper returning an exit code.
"""

from __future__ import annotations

from typing import Sequence

import click

from . import __init__conf__
from . import config as log_config
from . import runtime
from .domain.levels import LogLevel
from .domain.values import defer
from .runtime._settings import with_overrides

_LEVEL_CHOICES = [level.name.lower() for level in LogLevel]
_DESTINATION_CHOICES = [destination.value for destination in runtime.Destination]


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before reading LOG_* settings (default: ${log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, *, version: bool, use_dotenv: bool | None) -> None:
    """Logging facade utilities."""

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)

    load_dotenv = log_config.dotenv_requested() if use_dotenv is None else use_dotenv
    if load_dotenv:
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("info")
def info_command() -> None:
    """Print the package metadata banner."""

    click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("demo")
@click.option(
    "--destination",
    type=click.Choice(_DESTINATION_CHOICES),
    default=None,
    help="Output destination; LOG_DESTINATION takes precedence when set.",
)
@click.option(
    "--level",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    default=None,
    help="Minimum level; LOG_LEVEL takes precedence when set.",
)
@click.option("--tag", default=None, help="Tag rendered by the console destination; LOG_TAG takes precedence when set.")
@click.option("--name", default="demo", show_default=True, help="Logger name.")
def demo_command(destination: str | None, level: str | None, tag: str | None, name: str) -> None:
    """Emit one message per level through the configured destination.

    LOG_* environment variables override these options, just as they override
    any RuntimeConfig passed to runtime.init().
    """

    config = with_overrides(
        runtime.RuntimeConfig(name=name, level=LogLevel.DEBUG),
        destination=destination,
        level=level,
        tag=tag,
    )
    try:
        runtime.init(config)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    try:
        logger = runtime.get()
        logger.debug("debug details: {}", defer(lambda: "computed only when debug is enabled"))
        logger.info("service {} started on port {}", name, 8080)
        logger.warn("disk usage at {}%", 91)
        logger.error("request failed: {}", "upstream timeout")
        if runtime.inspect_runtime().capture_present:
            for line in runtime.captured().get_message_strings():
                click.echo(line)
    finally:
        runtime.shutdown()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click command group and return its exit code.

    >>> main(["--version"])  # doctest: +ELLIPSIS
    1...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main"]
