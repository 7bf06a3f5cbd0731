"""Addon descriptors (``.toc`` files).

Every addon folder ``Foo/`` is expected to contain ``Foo/Foo.toc``. The file
name must match the folder name exactly; there is no fallback search. The
``Descriptor`` built from it keeps every tag verbatim and adds a normalized
version derived from the ``Version`` tag.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from addonkeeper.exceptions import DescriptorUnreadable, VersionUnparseable
from addonkeeper.toc.tags import parse_tags
from addonkeeper.toc.version import SemanticVersion, normalize_version

logger = logging.getLogger(__name__)

TOC_SUFFIX = ".toc"
DEPENDENCY_SEPARATOR = ", "


@dataclass(frozen=True)
class Descriptor:
    """Metadata read from one TOC file.

    Attributes:
        tags: Every ``## Name: Value`` tag in the file. For duplicate names
            the last occurrence wins.
        parsed_version: The normalized ``Version`` tag. None when the tag is
            absent or could not be normalized.
        version_error: Why normalization failed, when the descriptor was
            parsed with ``strict=False``.
    """

    tags: dict[str, str] = field(default_factory=dict)
    parsed_version: SemanticVersion | None = None
    version_error: VersionUnparseable | None = None

    def get(self, name: str) -> str | None:
        """Return the raw value of tag ``name``, or None."""
        return self.tags.get(name)

    def raw_version(self) -> str | None:
        return self.tags.get("Version")

    def title(self) -> str | None:
        return self.tags.get("Title")

    def notes(self) -> str | None:
        return self.tags.get("Notes")

    def author(self) -> str | None:
        return self.tags.get("Author")

    def dependencies(self) -> list[str]:
        """Names listed in the ``Dependencies`` tag.

        The tag is split on ``", "``, so a dependency whose own name contains
        that sequence cannot be represented.
        """
        value = self.tags.get("Dependencies")
        if value is None:
            return []
        deps = (piece.strip() for piece in value.split(DEPENDENCY_SEPARATOR))
        return [dep for dep in deps if dep]


def descriptor_path(addon_name: str, addon_dir: Path) -> Path:
    """Return where the TOC file for ``addon_name`` must live."""
    return addon_dir / f"{addon_name}{TOC_SUFFIX}"


def parse_descriptor(
    addon_name: str,
    addon_dir: Path,
    *,
    strict: bool = True,
) -> Descriptor:
    """Read and parse the TOC file of one addon.

    Args:
        addon_name: The addon folder name.
        addon_dir: The addon folder.
        strict: When True, an unparseable ``Version`` tag raises. When
            False, the descriptor is returned without a version and the
            error is kept on ``version_error``.

    Returns:
        The parsed ``Descriptor``.

    Raises:
        DescriptorUnreadable: The TOC file is missing, unreadable or not
            valid UTF-8.
        VersionUnparseable: ``strict`` is set and the version tag could not
            be normalized.
    """
    path = descriptor_path(addon_name, addon_dir)
    try:
        with path.open(encoding="utf-8") as fh:
            tags = parse_tags(fh)
    except (OSError, UnicodeDecodeError) as exc:
        raise DescriptorUnreadable(path, str(exc)) from exc

    raw = tags.get("Version")
    if raw is None:
        return Descriptor(tags=tags)

    try:
        version = normalize_version(raw)
    except VersionUnparseable as exc:
        if strict:
            raise
        logger.warning("Unparseable version in %s: %r", path, raw)
        return Descriptor(tags=tags, version_error=exc)
    return Descriptor(tags=tags, parsed_version=version)
