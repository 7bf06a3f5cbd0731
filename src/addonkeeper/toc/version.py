"""Semantic versions as written in TOC ``Version`` tags.

Two layers:

- ``parse_semver`` is a strict SemVer 2.0.0 parser. It classifies failures
  so that callers can tell a truncated version (``1.2``) from one with a
  stray character (``v1.2.3``).
- ``normalize_version`` is the lenient front end used for TOC files. Addon
  authors routinely write ``1.2``, ``v1.2.3`` or ``r45``; it rewrites the
  string until the strict parser accepts it, or gives up.

References
----------
.. [SemVer] Preston-Werner, T. (2013). "Semantic Versioning 2.0.0."
   https://semver.org/
"""

from __future__ import annotations

from dataclasses import dataclass

from addonkeeper.exceptions import VersionUnparseable

# Extra rewrites beyond one per character: a bare "1" needs ".0" twice.
_MAX_COMPLETIONS = 2

_IDENT_CHARS = frozenset(
    "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-"
)


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------


class SemverSyntaxError(ValueError):
    """A string is not a strict semantic version.

    Raised directly for failures that no rewrite can fix, such as leading
    zeros in a numeric component.
    """


class UnexpectedEnd(SemverSyntaxError):
    """The string ended where another component was required."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unexpected end of version: {text!r}")


class UnexpectedToken(SemverSyntaxError):
    """A character appeared where it is not allowed."""

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        self.position = position
        self.token = text[position]
        super().__init__(
            f"Unexpected {self.token!r} at position {position} in {text!r}"
        )


# ---------------------------------------------------------------------------
# SemanticVersion
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SemanticVersion:
    """A parsed ``MAJOR.MINOR.PATCH[-PRE][+BUILD]`` version.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        pre: Dot-separated pre-release identifiers, if any.
        build: Dot-separated build metadata identifiers, if any.
    """

    major: int
    minor: int
    patch: int
    pre: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            text += "-" + ".".join(self.pre)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


# ---------------------------------------------------------------------------
# Strict parser
# ---------------------------------------------------------------------------


def _numeric(text: str, pos: int) -> tuple[int, int]:
    """Read a numeric component starting at ``pos``."""
    if pos >= len(text):
        raise UnexpectedEnd(text)
    end = pos
    while end < len(text) and text[end].isascii() and text[end].isdigit():
        end += 1
    if end == pos:
        raise UnexpectedToken(text, pos)
    digits = text[pos:end]
    if len(digits) > 1 and digits[0] == "0":
        raise SemverSyntaxError(f"Leading zero in {digits!r} in {text!r}")
    return int(digits), end


def _dot(text: str, pos: int) -> int:
    if pos >= len(text):
        raise UnexpectedEnd(text)
    if text[pos] != ".":
        raise UnexpectedToken(text, pos)
    return pos + 1


def _identifiers(text: str, pos: int, *, numeric_rules: bool) -> tuple[tuple[str, ...], int]:
    """Read dot-separated identifiers up to ``+`` or the end of the string."""
    idents: list[str] = []
    while True:
        end = pos
        while end < len(text) and text[end] in _IDENT_CHARS:
            end += 1
        if end == pos:
            if pos >= len(text):
                raise UnexpectedEnd(text)
            raise UnexpectedToken(text, pos)
        ident = text[pos:end]
        if numeric_rules and ident.isdigit() and len(ident) > 1 and ident[0] == "0":
            raise SemverSyntaxError(f"Leading zero in {ident!r} in {text!r}")
        idents.append(ident)
        if end < len(text) and text[end] == ".":
            pos = end + 1
            continue
        return tuple(idents), end


def parse_semver(text: str) -> SemanticVersion:
    """Parse a strict semantic version.

    Args:
        text: Version string, e.g. ``"1.2.3"`` or ``"2.0.0-beta.1+build5"``.

    Returns:
        The parsed ``SemanticVersion``.

    Raises:
        UnexpectedEnd: The string is missing trailing components.
        UnexpectedToken: A character is not allowed where it appears.
        SemverSyntaxError: Any other violation (leading zeros).
    """
    major, pos = _numeric(text, 0)
    pos = _dot(text, pos)
    minor, pos = _numeric(text, pos)
    pos = _dot(text, pos)
    patch, pos = _numeric(text, pos)

    pre: tuple[str, ...] = ()
    build: tuple[str, ...] = ()
    if pos < len(text) and text[pos] == "-":
        pre, pos = _identifiers(text, pos + 1, numeric_rules=True)
    if pos < len(text) and text[pos] == "+":
        build, pos = _identifiers(text, pos + 1, numeric_rules=False)
    if pos < len(text):
        raise UnexpectedToken(text, pos)

    return SemanticVersion(major, minor, patch, pre, build)


# ---------------------------------------------------------------------------
# Lenient normalization
# ---------------------------------------------------------------------------


def normalize_version(raw: str) -> SemanticVersion:
    """Coerce a hand-written version string into a ``SemanticVersion``.

    Rewrite rules, applied until the strict parser succeeds:

    - too few components (``UnexpectedEnd``): append ``".0"``;
    - an unexpected character (``UnexpectedToken``): drop the first
      character of the string.

    Examples: ``"1.2"`` -> ``"1.2.0"``, ``"v1.2.3"`` -> ``"1.2.3"``,
    ``"1"`` -> ``"1.0"`` -> ``"1.0.0"``.

    At most ``len(raw) + 2`` rewrites are attempted. A leading zero in a
    numeric component (``"1.02"``) fails at once instead of being rewritten,
    so such versions come out as unparseable rather than a guessed number.

    Args:
        raw: The Version tag value as written.

    Returns:
        The normalized version.

    Raises:
        VersionUnparseable: A failure no rule can fix, or the rewrite
            budget ran out.
    """
    budget = len(raw) + _MAX_COMPLETIONS
    candidate = raw
    for _ in range(budget + 1):
        try:
            return parse_semver(candidate)
        except UnexpectedEnd:
            candidate = f"{candidate}.0"
        except UnexpectedToken:
            candidate = candidate[1:]
        except SemverSyntaxError as exc:
            raise VersionUnparseable(raw, str(exc)) from exc
    raise VersionUnparseable(raw, f"gave up after {budget} rewrites")
