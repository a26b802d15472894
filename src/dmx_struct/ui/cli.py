"""
Command-Line Interface for dmx-struct.

Provides commands for converting DMX addresses between dotted and
absolute notation.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import structlog

from dmx_struct import __version__
from dmx_struct.core.config import Settings
from dmx_struct.core.exceptions import ConfigError, InvalidDMXAddressError
from dmx_struct.dmx.address import DMXAddress, parse_address

logger = structlog.get_logger()

STYLE_CHOICES = ["dotted", "absolute", "json"]


def _configure_logging(log_level: str) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def render_address(address: DMXAddress, style: str) -> str:
    """Render an address in one of the supported output styles."""
    if style == "absolute":
        return str(address.absolute)
    if style == "json":
        return address.model_dump_json()
    return str(address)


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: Optional[str]) -> None:
    """
    dmx-struct - DMX512 address conversion

    Reads addresses written as universe.channel (e.g. 1.234) or as an
    absolute index (e.g. 1024) and prints them in canonical form.
    """
    ctx.ensure_object(dict)

    try:
        settings = Settings.from_yaml(Path(config)) if config else Settings()
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    if debug:
        settings.debug = True
        settings.log_level = "DEBUG"

    _configure_logging(settings.log_level)

    ctx.obj["debug"] = settings.debug
    ctx.obj["settings"] = settings


@cli.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option(
    "--style",
    type=click.Choice(STYLE_CHOICES),
    default=None,
    help="Output style (defaults to the configured style)",
)
@click.pass_context
def parse(ctx: click.Context, tokens: tuple[str, ...], style: Optional[str]) -> None:
    """Parse one or more DMX addresses."""
    settings: Settings = ctx.obj["settings"]
    style = style or settings.output.style

    failures = 0
    for token in tokens:
        try:
            address = parse_address(token)
        except InvalidDMXAddressError as e:
            failures += 1
            logger.warning("Rejected DMX address", token=token)
            click.echo(f"Error: {token!r}: {e.message}", err=True)
            continue

        logger.debug(
            "Parsed DMX address",
            token=token,
            universe=address.universe,
            channel=address.channel,
            absolute=address.absolute,
        )
        click.echo(render_address(address, style))

    if failures:
        sys.exit(1)


@cli.command("format")
@click.argument("universe", type=int)
@click.argument("channel", type=int)
@click.pass_context
def format_(ctx: click.Context, universe: int, channel: int) -> None:
    """Format a universe and channel as universe.channel."""
    try:
        address = DMXAddress.from_parts(universe, channel)
    except InvalidDMXAddressError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo(str(address))


def main() -> None:
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
