"""``addonkeeper list`` — List installed addons.

Reads every folder in the AddOns directory. Folders without a readable TOC
file are skipped (and counted); addons whose version cannot be parsed are
listed with version "unknown".

Exit Codes:
    0 — Listing produced (possibly empty).
    2 — The AddOns folder cannot be read.
"""

from __future__ import annotations

import sys

import click

from addonkeeper.config import AddonsConfig
from addonkeeper.discovery import AddonListing, list_installed
from addonkeeper.exceptions import DirectoryUnreadable


def _listing_to_json(listing: AddonListing) -> dict:
    """Convert a listing to a JSON-serializable dict."""
    return {
        "addons": [addon.to_dict() for addon in listing.addons],
        "skipped": [
            {"path": str(s.path), "reason": s.reason} for s in listing.skipped
        ],
    }


@click.command("list")
@click.option("--filter", "name_filter", default=None, help="Only addons whose name contains TEXT.")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json", "plain"]),
    default="text",
    help="Output format (default: text). 'plain' prints one 'name version' line per addon.",
)
@click.pass_obj
def list_command(config: AddonsConfig, name_filter: str | None, output_format: str) -> None:
    """List installed addons and their versions, sorted by name."""
    try:
        listing = list_installed(config.addons_dir, name_filter=name_filter)
    except DirectoryUnreadable as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    if output_format == "json":
        from addonkeeper.cli.output import print_json
        print_json(_listing_to_json(listing))
    elif output_format == "plain":
        for addon in listing.addons:
            click.echo(addon.summary())
    else:
        from addonkeeper.cli.output import print_addon_list
        print_addon_list(listing)
