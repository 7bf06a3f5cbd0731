"""Tag lines of a TOC file.

A TOC file is line oriented. Metadata lines look like::

    ## Title: My Addon
    ## Version: 1.2.3

Everything else (file lists, ``#`` comments, blank lines) is not metadata
and is ignored. Tag lines may appear anywhere in the file, interleaved with
other content, so callers must read the whole file.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

TAG_MARKER = "##"
TAG_SEPARATOR = ": "
_BOM = "\ufeff"


@dataclass(frozen=True)
class Tag:
    """One ``## Name: Value`` line."""

    name: str
    value: str


def parse_tag_line(line: str) -> Tag | None:
    """Recognize a single tag line.

    The line is stripped of surrounding whitespace and then of a leading
    byte-order mark. It is a tag line only if it then starts with ``##``.
    The name and value are split on the first ``": "``.

    Returns:
        The ``Tag``, or None for non-tag lines and tag lines without a
        separator.
    """
    text = line.strip().lstrip(_BOM)
    if not text.startswith(TAG_MARKER):
        return None
    while text.startswith(TAG_MARKER):
        text = text[len(TAG_MARKER):]
    name, sep, value = text.lstrip().partition(TAG_SEPARATOR)
    if not sep:
        return None
    return Tag(name=name, value=value)


def parse_tags(lines: Iterable[str]) -> dict[str, str]:
    """Collect all tags from ``lines``. Later duplicates overwrite earlier ones."""
    tags: dict[str, str] = {}
    for line in lines:
        tag = parse_tag_line(line)
        if tag is None:
            continue
        tags[tag.name] = tag.value
    return tags
