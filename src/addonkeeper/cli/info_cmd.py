"""``addonkeeper info <name>`` — Show one addon's TOC metadata.

The name is matched against addon folder names ignoring case. Unlike
``list``, any problem with the addon (missing TOC file, malformed version)
is reported as an error.

Exit Codes:
    0 — Addon found and described.
    1 — No such addon, or its TOC file could not be read or parsed.
    2 — The AddOns folder cannot be read.
"""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click

from addonkeeper.config import AddonsConfig
from addonkeeper.discovery import find_by_name
from addonkeeper.exceptions import (
    AddonKeeperError,
    AddonNotFound,
    DirectoryUnreadable,
)


def _fail(message: str, output_format: str, code: int) -> NoReturn:
    """Report an error in the requested format and exit."""
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}", err=True)
    sys.exit(code)


@click.command("info")
@click.argument("name")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_obj
def info_command(config: AddonsConfig, name: str, output_format: str) -> None:
    """Show version, notes, author, path and dependencies of addon NAME."""
    try:
        record = find_by_name(config.addons_dir, name)
    except DirectoryUnreadable as exc:
        _fail(str(exc), output_format, 2)
    except AddonNotFound as exc:
        _fail(f"Addon not found: {exc.name} (looked in {exc.root})", output_format, 1)
    except AddonKeeperError as exc:
        _fail(str(exc), output_format, 1)

    if output_format == "json":
        click.echo(json.dumps(record.to_dict(), indent=2))
    else:
        from addonkeeper.cli.output import print_addon_detail
        print_addon_detail(record)
