"""Directory scanner for the AddOns folder.

Each immediate subdirectory of the AddOns folder is a candidate addon.
Plain files are ignored, and so are entries that cannot be inspected
(permission errors, entries deleted mid-scan): one bad entry must not hide
the rest of the folder.
"""

from __future__ import annotations

import logging
from pathlib import Path

from addonkeeper.exceptions import DirectoryUnreadable

logger = logging.getLogger(__name__)


def scan_addon_dirs(root: Path) -> list[Path]:
    """List the immediate subdirectories of ``root``.

    Args:
        root: The AddOns folder.

    Returns:
        Subdirectory paths, sorted.

    Raises:
        DirectoryUnreadable: ``root`` does not exist, is not a directory,
            or cannot be listed.
    """
    try:
        entries = sorted(root.iterdir())
    except (PermissionError, OSError) as exc:
        raise DirectoryUnreadable(root, exc.strerror or str(exc)) from exc

    dirs: list[Path] = []
    for entry in entries:
        try:
            if not entry.is_dir():
                continue
        except (PermissionError, OSError):
            logger.debug("Skipping unreadable entry: %s", entry, exc_info=True)
            continue
        dirs.append(entry)
    return dirs
