"""Selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Selectorkit - build CSS selectors and canonical JSON from the shell."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# Import and register subcommands
from selectorkit.cli.selector import combine, selector  # noqa: E402
from selectorkit.cli.canonical import json_canonical  # noqa: E402

cli.add_command(selector)
cli.add_command(combine)
cli.add_command(json_canonical)
