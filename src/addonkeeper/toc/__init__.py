"""TOC descriptor parsing.

Public API::

    from addonkeeper.toc import parse_descriptor

    toc = parse_descriptor("Bagnon", Path("AddOns/Bagnon"))
    print(toc.parsed_version, toc.author(), toc.dependencies())
"""

from __future__ import annotations

from addonkeeper.toc.descriptor import Descriptor, descriptor_path, parse_descriptor
from addonkeeper.toc.tags import Tag, parse_tag_line, parse_tags
from addonkeeper.toc.version import (
    SemanticVersion,
    SemverSyntaxError,
    UnexpectedEnd,
    UnexpectedToken,
    normalize_version,
    parse_semver,
)

__all__ = [
    "Descriptor",
    "SemanticVersion",
    "SemverSyntaxError",
    "Tag",
    "UnexpectedEnd",
    "UnexpectedToken",
    "descriptor_path",
    "normalize_version",
    "parse_descriptor",
    "parse_semver",
    "parse_tag_line",
    "parse_tags",
]
