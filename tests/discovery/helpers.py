"""Shared test helpers for creating fake AddOns folders.

Each helper creates a minimal but realistic addon layout. These are used by
the discovery, CLI and property tests.
"""

from __future__ import annotations

from pathlib import Path

BAGNON_TOC = (
    "## Interface: 110002\n"
    "## Title: Bagnon\n"
    "## Notes: Single window displays for your inventory\n"
    "## Author: Jaliborc\n"
    "## Version: 10.2\n"
    "## Dependencies: BagBrother, WildAddon-1.1\n"
    "\n"
    "# Load order\n"
    "main.lua\n"
    "## SavedVariables: Bagnon_Sets\n"
)

NO_VERSION_TOC = (
    "## Title: Nameplates\n"
    "## Author: Someone\n"
    "core.lua\n"
)

BAD_VERSION_TOC = (
    "## Title: Broken\n"
    "## Version: 01.2.3\n"
)


def write_addon(
    root: Path,
    name: str,
    toc: str | None = None,
    toc_name: str | None = None,
) -> Path:
    """Create addon folder ``root/name`` and optionally its TOC file.

    Args:
        root: The AddOns folder.
        name: Addon folder name.
        toc: TOC file content. No TOC file is written when None.
        toc_name: File name stem for the TOC, defaulting to ``name``.
    """
    folder = root / name
    folder.mkdir(parents=True, exist_ok=True)
    if toc is not None:
        (folder / f"{toc_name or name}.toc").write_text(toc, encoding="utf-8")
    return folder


def create_mixed_addons(root: Path) -> None:
    """Create a realistic AddOns folder with good and bad entries.

    - ``Bagnon``: complete TOC.
    - ``Nameplates``: TOC without a Version tag.
    - ``Broken``: TOC with a version no rewrite can fix.
    - ``Blizzard_Stub``: folder without any TOC file.
    - ``README.txt``: a plain file, not an addon.
    """
    write_addon(root, "Bagnon", BAGNON_TOC)
    write_addon(root, "Nameplates", NO_VERSION_TOC)
    write_addon(root, "Broken", BAD_VERSION_TOC)
    write_addon(root, "Blizzard_Stub")
    (root / "README.txt").write_text("not an addon\n")
