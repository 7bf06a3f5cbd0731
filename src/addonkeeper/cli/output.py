"""Rich output formatting helpers for the addonkeeper CLI.

Provides the addon table for ``list`` and the detail panel for ``info``.
Versions are colored by how much of them could be resolved:

    resolved = green, unknown = yellow
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from addonkeeper.discovery import UNKNOWN_VERSION, AddonListing, AddonRecord

console = Console()


def version_style(label: str) -> str:
    """Return the Rich style string for a version label."""
    return "yellow" if label == UNKNOWN_VERSION else "green"


def print_addon_list(listing: AddonListing) -> None:
    """Print a table of installed addons and their versions.

    Args:
        listing: Result of ``list_installed``.
    """
    if not listing.addons:
        console.print("[dim]No addons found.[/dim]")
    else:
        table = Table(title="Installed Addons", show_header=True, header_style="bold")
        table.add_column("Addon", style="bold")
        table.add_column("Version")
        for addon in listing.addons:
            label = addon.version_label
            table.add_row(Text(addon.name), Text(label, style=version_style(label)))
        console.print(table)
    _print_list_summary(listing)


def _print_list_summary(listing: AddonListing) -> None:
    """Print a one-line summary after the addon table."""
    parts = [f"[bold]{len(listing.addons)}[/bold] addons"]
    unknown = sum(1 for a in listing.addons if a.version_label == UNKNOWN_VERSION)
    if unknown > 0:
        parts.append(f"[yellow]{unknown} without version[/yellow]")
    if listing.skipped:
        parts.append(f"[red]{len(listing.skipped)} skipped[/red]")
    console.print(" | ".join(parts))


def print_addon_detail(record: AddonRecord) -> None:
    """Print everything known about one addon.

    Args:
        record: The addon to describe.
    """
    toc = record.descriptor
    header = Text.assemble(
        ("Addon: ", "bold"), (record.name, ""),
        ("  Version: ", "bold"),
        (record.version_label, version_style(record.version_label)),
    )
    console.print(Panel(header, title="Addon Info"))

    notes = toc.notes()
    if notes is not None:
        console.print(f"  {notes}", markup=False, soft_wrap=True)
    author = toc.author()
    if author is not None:
        console.print(f"  Author: {author}", markup=False, soft_wrap=True)
    console.print(f"  Path: {record.source_path}", markup=False, soft_wrap=True)

    deps = toc.dependencies()
    if deps:
        console.print("  Dependencies:")
        for dep in deps:
            console.print(f"    - {dep}", markup=False, soft_wrap=True)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout.

    Args:
        data: Any JSON-serializable data structure.
    """
    console.print_json(json.dumps(data, default=str))
