"""Addons directory configuration.

The game keeps one ``Interface/AddOns`` folder per client flavor (retail,
classic, ...), under an install location that depends on the platform.
``resolve_config`` turns the user's choices into an ``AddonsConfig`` that is
handed to the CLI commands explicitly.

Platform Notes:
    macOS installs under ``/Applications/World of Warcraft``.
    Windows uses ``C:\\Program Files (x86)\\World of Warcraft``.
    Linux has no native client; the default is the Lutris Wine prefix
    under ``~/Games/world-of-warcraft``.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

# Flavor name -> install subfolder used by the game launcher.
FLAVOR_DIRS: dict[str, str] = {
    "retail": "_retail_",
    "classic": "_classic_",
    "classic_era": "_classic_era_",
    "ptr": "_ptr_",
}

DEFAULT_FLAVOR = "retail"

_INSTALL_ROOTS: dict[str, PurePath] = {
    "macos": PurePosixPath("/Applications/World of Warcraft"),
    "windows": PureWindowsPath(r"C:\Program Files (x86)\World of Warcraft"),
    "linux": PurePosixPath(
        "Games/world-of-warcraft/drive_c/Program Files (x86)/World of Warcraft"
    ),
}


@dataclass(frozen=True)
class AddonsConfig:
    """Where to look for installed addons.

    Attributes:
        addons_dir: Directory whose immediate subfolders are addons.
        flavor: Client flavor the directory belongs to. Informational when
            ``addons_dir`` was given explicitly.
    """

    addons_dir: Path
    flavor: str = DEFAULT_FLAVOR


def current_platform() -> str:
    """Return the current platform identifier."""
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    return "windows" if system == "windows" else "linux"


def default_addons_dir(
    flavor: str = DEFAULT_FLAVOR,
    system: str | None = None,
    home: Path | None = None,
) -> Path:
    """Build the default AddOns directory for a flavor and platform.

    Args:
        flavor: One of ``FLAVOR_DIRS``.
        system: Platform identifier ("macos", "windows", "linux").
            Defaults to the running platform.
        home: Home directory for the Linux default (for testing).

    Raises:
        ValueError: If the flavor or platform is unknown.
    """
    if flavor not in FLAVOR_DIRS:
        raise ValueError(f"Unknown flavor: {flavor!r}")
    system = system or current_platform()
    if system not in _INSTALL_ROOTS:
        raise ValueError(f"Unknown platform: {system!r}")

    install = _INSTALL_ROOTS[system] / FLAVOR_DIRS[flavor] / "Interface" / "AddOns"
    if system == "linux":
        return (home if home is not None else Path.home()) / install.as_posix()
    return Path(str(install))


def resolve_config(
    addons_dir: Path | None = None,
    flavor: str = DEFAULT_FLAVOR,
    system: str | None = None,
) -> AddonsConfig:
    """Return the effective configuration.

    An explicit ``addons_dir`` always wins over the platform default.
    """
    if addons_dir is None:
        addons_dir = default_addons_dir(flavor, system=system)
    return AddonsConfig(addons_dir=Path(addons_dir), flavor=flavor)
