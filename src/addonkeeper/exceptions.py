"""addonkeeper exception hierarchy.

All public exceptions inherit from AddonKeeperError, giving callers a single
base class to catch when they want to handle any addonkeeper-specific failure
without swallowing unrelated errors.
"""

from __future__ import annotations

from pathlib import Path


class AddonKeeperError(Exception):
    """Base exception for all addonkeeper errors."""


class DirectoryUnreadable(AddonKeeperError):
    """Raised when the addons root directory cannot be opened.

    Covers a missing root, a root that is not a directory, and permission
    failures. Fatal to a whole listing.
    """

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Cannot read addons directory: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidAddonEntry(AddonKeeperError):
    """Raised when a scanned entry cannot be turned into an addon."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class NotFolder(InvalidAddonEntry):
    """Raised when an entry path has no final component to use as a name."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Not an addon folder: {path}")


class InvalidName(InvalidAddonEntry):
    """Raised when an entry name is not valid UTF-8 text."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Addon folder name is not valid text: {path!r}")


class DescriptorUnreadable(AddonKeeperError):
    """Raised when an addon's ``.toc`` file is missing or unreadable.

    This is the common case for folders that are not addons, or whose
    descriptor is named differently from the folder. Recoverable per addon.
    """

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Cannot read TOC file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class VersionUnparseable(AddonKeeperError, ValueError):
    """Raised when a Version tag cannot be normalized to a semantic version.

    Attributes:
        raw: The Version tag value exactly as written in the TOC file.
        reason: Why normalization gave up.
    """

    def __init__(self, raw: str, reason: str = "") -> None:
        self.raw = raw
        self.reason = reason
        message = f"Unparseable version: {raw!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class AddonNotFound(AddonKeeperError):
    """Raised when no addon folder matches a name lookup."""

    def __init__(self, name: str, root: Path) -> None:
        self.name = name
        self.root = root
        super().__init__(f"No addon named {name!r} in {root}")
