"""CLI command: selectorkit json-canonical -- re-encode JSON text."""

from __future__ import annotations

import json
import sys

import click

from selectorkit.config import JsonConfig
from selectorkit.serialization import SerializationError, to_json


@click.command("json-canonical")
@click.argument("text")
@click.option("--sort-keys/--no-sort-keys", default=True, help="Sort object keys")
@click.option("--indent", default=None, type=int, help="Indent width (compact if omitted)")
def json_canonical(text: str, sort_keys: bool, indent: int | None) -> None:
    """Print TEXT re-encoded as canonical JSON."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON: {exc.msg}", err=True)
        sys.exit(1)

    try:
        click.echo(to_json(data, JsonConfig(sort_keys=sort_keys, indent=indent)))
    except SerializationError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)
