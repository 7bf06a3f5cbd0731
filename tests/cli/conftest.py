"""Shared fixtures for CLI tests.

Provides a Click runner and AddOns folders in various states for invoking
``addonkeeper`` commands against.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.discovery.helpers import create_mixed_addons


@pytest.fixture
def runner() -> CliRunner:
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def mixed_addons_dir(addons_dir: Path) -> Path:
    """AddOns folder with good, version-less, broken and TOC-less addons."""
    create_mixed_addons(addons_dir)
    return addons_dir
