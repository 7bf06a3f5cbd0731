"""Discovery of installed addons.

Public API::

    from addonkeeper.discovery import find_by_name, list_installed

    listing = list_installed(Path("Interface/AddOns"))
    for addon in listing.addons:
        print(addon.summary())
"""

from __future__ import annotations

from addonkeeper.discovery.catalog import find_by_name, list_installed
from addonkeeper.discovery.models import (
    UNKNOWN_VERSION,
    AddonListing,
    AddonRecord,
    SkippedAddon,
    addon_name_from_path,
)
from addonkeeper.discovery.scanner import scan_addon_dirs

__all__ = [
    "UNKNOWN_VERSION",
    "AddonListing",
    "AddonRecord",
    "SkippedAddon",
    "addon_name_from_path",
    "find_by_name",
    "list_installed",
    "scan_addon_dirs",
]
