"""Shared fixtures for addonkeeper tests."""

import pathlib

import pytest

from tests.discovery.helpers import BAGNON_TOC, write_addon


@pytest.fixture
def addons_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty AddOns folder."""
    root = tmp_path / "AddOns"
    root.mkdir()
    return root


@pytest.fixture
def bagnon_dir(addons_dir: pathlib.Path) -> pathlib.Path:
    """Create an AddOns folder holding a single well-formed addon."""
    write_addon(addons_dir, "Bagnon", BAGNON_TOC)
    return addons_dir
