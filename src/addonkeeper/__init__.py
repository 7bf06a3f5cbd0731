"""addonkeeper: List installed World of Warcraft addons and read their TOC metadata."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
