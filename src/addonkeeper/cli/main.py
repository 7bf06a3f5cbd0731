"""addonkeeper CLI: inspect installed World of Warcraft addons.

Entry point for the ``addonkeeper`` command-line tool. The group resolves
the AddOns folder once and hands it to every subcommand through the Click
context.

Commands:
    list — List installed addons with their versions.
    info — Show the TOC metadata of one addon.

Usage::

    addonkeeper list
    addonkeeper list --filter bag
    addonkeeper --flavor classic info Questie
    addonkeeper --addons-dir ~/wow/Interface/AddOns info bagnon --format json
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from addonkeeper import __version__
from addonkeeper.cli.info_cmd import info_command
from addonkeeper.cli.list_cmd import list_command
from addonkeeper.config import DEFAULT_FLAVOR, FLAVOR_DIRS, resolve_config


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--addons-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="ADDONKEEPER_ADDONS_DIR",
    default=None,
    help="AddOns folder to read (default: the game's folder for --flavor).",
)
@click.option(
    "--flavor",
    type=click.Choice(sorted(FLAVOR_DIRS)),
    envvar="ADDONKEEPER_FLAVOR",
    default=DEFAULT_FLAVOR,
    show_default=True,
    help="Game client flavor used to locate the default AddOns folder.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log skipped folders and details.")
@click.pass_context
def cli(ctx: click.Context, addons_dir: Path | None, flavor: str, verbose: bool) -> None:
    """addonkeeper: List installed addons and read their TOC metadata."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = resolve_config(addons_dir=addons_dir, flavor=flavor)


# Register all subcommands
cli.add_command(list_command)
cli.add_command(info_command)
