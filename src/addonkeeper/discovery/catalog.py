"""Listing and lookup over an AddOns folder.

Error policy:
    ``list_installed`` is tolerant. A folder without a readable TOC file is
    skipped and logged, and an unparseable version is shown as "unknown".
    ``find_by_name`` is strict. The user asked about one addon, so every
    problem with it is raised.
"""

from __future__ import annotations

import logging
from pathlib import Path

from addonkeeper.discovery.models import AddonListing, AddonRecord, SkippedAddon
from addonkeeper.discovery.scanner import scan_addon_dirs
from addonkeeper.exceptions import (
    AddonNotFound,
    DescriptorUnreadable,
    InvalidAddonEntry,
)

logger = logging.getLogger(__name__)


def _sort_key(record: AddonRecord) -> tuple[str, str]:
    return record.name.lower(), record.name


def list_installed(root: Path, name_filter: str | None = None) -> AddonListing:
    """Read every addon under ``root``.

    Args:
        root: The AddOns folder.
        name_filter: Keep only addons whose name contains this text,
            compared case-insensitively.

    Returns:
        An ``AddonListing`` with records sorted by name.

    Raises:
        DirectoryUnreadable: ``root`` cannot be listed.
    """
    listing = AddonListing()
    needle = name_filter.lower() if name_filter else None

    for path in scan_addon_dirs(root):
        if needle is not None and needle not in path.name.lower():
            continue
        try:
            record = AddonRecord.from_path(path, strict=False)
        except (DescriptorUnreadable, InvalidAddonEntry) as exc:
            logger.warning("Skipping %s: %s", path, exc)
            listing.skipped.append(SkippedAddon(path=path, reason=str(exc)))
            continue
        listing.addons.append(record)

    listing.addons.sort(key=_sort_key)
    return listing


def _match_folder(folders: list[Path], name: str) -> Path | None:
    """Pick the folder for ``name``. An exact-case match beats other matches."""
    wanted = name.lower()
    matches = [f for f in folders if f.name.lower() == wanted]
    for folder in matches:
        if folder.name == name:
            return folder
    return matches[0] if matches else None


def find_by_name(root: Path, name: str) -> AddonRecord:
    """Look up one addon by folder name, ignoring case.

    Only the matching folder's TOC file is read.

    Raises:
        DirectoryUnreadable: ``root`` cannot be listed.
        AddonNotFound: No folder matches ``name``.
        DescriptorUnreadable: The matching addon has no readable TOC file.
        VersionUnparseable: The matching addon's version is malformed.
    """
    folder = _match_folder(scan_addon_dirs(root), name)
    if folder is None:
        raise AddonNotFound(name, root)
    return AddonRecord.from_path(folder, strict=True)
