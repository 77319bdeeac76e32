"""CLI entrypoint."""
from __future__ import annotations

from typing import Optional, Tuple

import click
from pydantic import ValidationError

from ..config import load_settings
from ..convert import collect_units, convert_units
from ..errors import EpochconvError
from ..formats import INPUT_RULES, OUTPUT_RULES, format_aliases
from ..lib.log import configure_logging, get_logger, resolve_log_level
from .helpers import fail

logger = get_logger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--from",
    "from_format",
    metavar="FORMAT",
    help=f"Input timestamp format ({', '.join(format_aliases(INPUT_RULES))})",
)
@click.option(
    "--to",
    "to_format",
    metavar="FORMAT",
    help=f"Output timestamp format ({', '.join(format_aliases(OUTPUT_RULES))})",
)
@click.option("--debug", is_flag=True, help="Enable debugging mode.")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Be more verbose; specify repeatedly for greater verbosity.",
)
@click.option("--json-logs", is_flag=True, help="Write stderr logs as JSON lines")
@click.version_option(package_name="epochconv", prog_name="epochconv")
@click.argument("values", nargs=-1)
def cli(
    from_format: Optional[str],
    to_format: Optional[str],
    debug: bool,
    verbose: int,
    json_logs: bool,
    values: Tuple[str, ...],
) -> None:
    """Convert epoch timestamps in VALUES (or stdin lines) to calendar strings."""
    try:
        settings = load_settings(
            from_format=from_format,
            to_format=to_format,
            json_logs=json_logs or None,
        )
    except ValidationError as exc:
        fail(f"invalid configuration: {exc}")

    configure_logging(resolve_log_level(verbose, debug), json_logs=settings.json_logs)
    logger.debug(
        "settings resolved",
        from_format=settings.from_format,
        to_format=settings.to_format,
    )

    stdin = click.get_binary_stream("stdin")
    try:
        for line in convert_units(collect_units(values, stdin), settings):
            click.echo(line)
    except EpochconvError as exc:
        logger.debug("conversion aborted", error=str(exc))
        fail(exc)


def main() -> None:
    cli()


__all__ = ["cli", "main"]
