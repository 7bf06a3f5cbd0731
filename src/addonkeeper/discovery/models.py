"""Data models for the discovery module.

Contains the record for one installed addon and the aggregate result of a
bulk listing, including the folders that had to be skipped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from addonkeeper.exceptions import InvalidName, NotFolder
from addonkeeper.toc import Descriptor, parse_descriptor

UNKNOWN_VERSION = "unknown"


def addon_name_from_path(path: Path) -> str:
    """Derive the addon name from its folder.

    Raises:
        NotFolder: The path has no final component (e.g. ``/``).
        InvalidName: The folder name is not valid UTF-8 text.
    """
    name = path.name
    if not name:
        raise NotFolder(path)
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidName(path) from exc
    return name


@dataclass(frozen=True)
class AddonRecord:
    """One installed addon.

    Attributes:
        name: The addon folder name.
        source_path: The addon folder.
        descriptor: Metadata from the addon's TOC file.
    """

    name: str
    source_path: Path
    descriptor: Descriptor

    @classmethod
    def from_path(cls, path: Path, *, strict: bool = True) -> AddonRecord:
        """Build a record for the addon folder at ``path``.

        Raises:
            InvalidAddonEntry: No usable name can be derived from ``path``.
            DescriptorUnreadable: The TOC file cannot be read.
            VersionUnparseable: ``strict`` is set and the version is bad.
        """
        name = addon_name_from_path(path)
        descriptor = parse_descriptor(name, path, strict=strict)
        return cls(name=name, source_path=path, descriptor=descriptor)

    @property
    def version_label(self) -> str:
        """The normalized version as text, or ``"unknown"``."""
        version = self.descriptor.parsed_version
        return str(version) if version is not None else UNKNOWN_VERSION

    def summary(self) -> str:
        """``"<name> <version>"``, or just the name when there is no version."""
        version = self.descriptor.parsed_version
        if version is None:
            return self.name
        return f"{self.name} {version}"

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable view of the record."""
        version = self.descriptor.parsed_version
        return {
            "name": self.name,
            "version": str(version) if version is not None else None,
            "raw_version": self.descriptor.raw_version(),
            "title": self.descriptor.title(),
            "notes": self.descriptor.notes(),
            "author": self.descriptor.author(),
            "path": str(self.source_path),
            "dependencies": self.descriptor.dependencies(),
        }


@dataclass
class SkippedAddon:
    """A folder left out of a listing, and why."""

    path: Path
    reason: str


@dataclass
class AddonListing:
    """Result of listing an AddOns folder.

    Attributes:
        addons: Records for every readable addon, sorted by name.
        skipped: Folders that could not be read as addons.
    """

    addons: list[AddonRecord] = field(default_factory=list)
    skipped: list[SkippedAddon] = field(default_factory=list)
